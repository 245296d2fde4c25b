import asyncio
import logging

from tgdrive.util import yes

TRACE = 5
logging.addLevelName(TRACE, "TRACE")


def get_name_part(name: str, part_idx: int) -> str | None:
    parts = name.split(".")

    try:
        return parts[part_idx]
    except IndexError:
        return None


class TgdriveLogger(logging.Logger):
    def __init__(self, name: str, level=logging.NOTSET) -> None:
        super().__init__(name, level)

        self.suffix_as_tag = False

    def trace(self, msg, *args, **kwargs):
        self.log(TRACE, msg, *args, **kwargs)

    def getChild(self, suffix: str, suffix_as_tag=False) -> "TgdriveLogger":
        child = super().getChild(suffix)
        child.suffix_as_tag = suffix_as_tag
        return child  # type: ignore

    def makeRecord(self, *args, **kwargs) -> logging.LogRecord:

        rec = super().makeRecord(*args, **kwargs)

        if self.suffix_as_tag and yes(self.parent):
            rec.name = self.parent.name
            rec.__dict__["tag"] = get_name_part(self.name, -1)
        else:
            rec.__dict__["tag"] = None

        return rec


logging.setLoggerClass(TgdriveLogger)

tgdrive_logger: TgdriveLogger = logging.getLogger("tgdrive")  # type: ignore


def getLogger(name: str) -> TgdriveLogger:
    return tgdrive_logger.getChild(name)  # type: ignore


class ContextFilter(logging.Filter):
    def filter(self, record: logging.LogRecord):
        try:
            task = asyncio.current_task()
        except RuntimeError:
            task = None

        if yes(task):
            record.task_name = task.get_name()
        else:
            record.task_name = "outside the loop"

        return True


class TgdriveLogRecord(logging.LogRecord):
    tag: str | None
    task_name: str


class Formatter(logging.Formatter):
    grey = "\x1b[90;20m"
    yellow = "\x1b[33;20m"
    red = "\x1b[31;20m"
    bold_red = "\x1b[31;1m"
    white = "\x1b[38;20m"
    reset = "\x1b[0m"

    COLORS = {
        TRACE: grey,
        logging.DEBUG: grey,
        logging.INFO: white,
        logging.WARNING: yellow,
        logging.ERROR: red,
        logging.CRITICAL: bold_red,
    }

    def __init__(self, print_task_name=False) -> None:
        super().__init__()
        self.print_task_name = print_task_name

    def _format(self, rec: TgdriveLogRecord) -> str:
        rec.message = rec.getMessage()
        name = rec.name.replace("tgdrive.", "", 1)
        tag = getattr(rec, "tag", None)

        if yes(tag):
            log_str = f"{rec.levelname} [{name}] [{tag}] {rec.message}"
        else:
            log_str = f"{rec.levelname} [{name}] {rec.message}"

        if self.print_task_name:
            log_str = f"{getattr(rec, 'task_name', '')} {log_str}"

        if rec.exc_info:
            log_str = f"{log_str}\n{self.formatException(rec.exc_info)}"

        return log_str

    def format(self, rec: TgdriveLogRecord) -> str:  # type: ignore

        if rec.levelno not in self.COLORS:
            return self._format(rec)

        color = self.COLORS[rec.levelno]

        return color + self._format(rec) + self.reset


def init_logging(debug_level: int = logging.INFO, print_task_name=False):
    logging.getLogger("asyncio").setLevel(logging.ERROR)
    logging.getLogger("telethon").setLevel(
        logging.INFO if debug_level <= logging.DEBUG else logging.WARNING
    )

    handler = logging.StreamHandler()
    handler.setFormatter(Formatter(print_task_name=print_task_name))
    handler.addFilter(ContextFilter())

    root_logger = logging.getLogger()

    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    root_logger.addHandler(handler)
    tgdrive_logger.setLevel(debug_level)
