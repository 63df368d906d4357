import logging

from rich.logging import RichHandler

FORMAT = "%(message)s"
logging.basicConfig(level="ERROR", format=FORMAT, datefmt="[%X]", handlers=[RichHandler()])

log = logging.getLogger("str_overlap")
log.setLevel(logging.WARNING)
