from tgdrive import tglog

logger = tglog.getLogger("cli")
