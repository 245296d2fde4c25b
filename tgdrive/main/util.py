import asyncio


def run_main(main_func, loop=None):

    loop = loop if loop is not None else asyncio.new_event_loop()

    try:
        loop.run_until_complete(main_func())
    except KeyboardInterrupt:
        print("\nKeyboardInterrupt")
    finally:
        if not loop.is_closed():
            loop.close()
