from rich.console import Console

from str_overlap.config import Config
from str_overlap.merge import merge
from str_overlap.overlap import overlap_end
from str_overlap.overlap import overlap_start
from str_overlap.utils.logger import log

console = Console()


def compute(config: Config) -> str:
    """
    Compute the overlap or merge requested by the configuration.

    With `direction="start"` the roles of `left` and `right` are swapped: the
    overlap is the start of `left` that `right` ends with, and merging puts
    `right` first.

    Parameters
    ----------
    config: Config
        The command line configuration object.

    Returns
    -------
    str
        The overlap, or the merged text when `mode` is "merge".
    """
    if config.mode == "merge":
        first, second = (config.left, config.right) if config.direction == "end" else (config.right, config.left)
        return merge(first, second, min_overlap=config.min_overlap)

    if config.direction == "end":
        result = overlap_end(config.left, config.right)
    else:
        result = overlap_start(config.left, config.right)
    return result if len(result) >= config.min_overlap else ""


def main(config: Config) -> str:
    log.setLevel(config.debug.logging_level)
    log.debug(f"Running with {config.model_dump()}")

    result = compute(config)
    console.print(result, markup=False, highlight=False, soft_wrap=True)
    return result


def run() -> None:
    from pydantic_settings import CliApp

    _ = main(CliApp.run(Config))


if __name__ == "__main__":
    run()
