"""nodecompat - ECMAScript edition compatibility of Node.js releases

    Returns:
        int: Exit code
"""
import asyncio
import json
import logging
import sys

from constants import ExitCodes, Modes
from common.errors import RetrievalError, StructuralError, UnknownRuntimeError
from common.logging_utils import configure_logging
from args import parse_args
from cli_config import CompatConfig, load_config
from compat import CompatibilityService

logger = logging.getLogger(__name__)


def _setup_logging(args) -> None:
    """Configure logging based on CLI arguments."""
    configure_logging(getattr(args, "LOG_LEVEL", None))

    log_file = getattr(args, "LOG_FILE", None)
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")
        )
        logging.getLogger().addHandler(file_handler)
        logger.info("Logging to file: %s", log_file)


async def run(config: CompatConfig):
    """Resolve compatibility for ``config`` and return a JSON-ready value."""
    async with CompatibilityService(
        base_url=config.base_url,
        releases_url=config.releases_url,
        threshold=config.threshold,
        timeout=config.timeout,
    ) as service:
        options = {"flag": config.flag, "fallback": config.fallback}
        if config.mode == Modes.MUTUAL.value:
            return await service.mutual(config.versions, **options)
        if config.mode == Modes.EXCLUSIVE.value:
            return await service.exclusive(config.versions, **options)
        if config.mode == Modes.ALL.value:
            return await service.all(config.versions, **options)
        results = await service.fetch_many(config.versions, **options)
        return [result.to_dict() for result in results]


def write_output(payload, output_path=None) -> None:
    """Write ``payload`` as JSON to ``output_path`` or stdout."""
    text = json.dumps(payload, indent=2)
    if not output_path:
        print(text)
        return
    try:
        with open(output_path, "w", encoding="utf-8") as file:
            file.write(text + "\n")
    except OSError as e:
        logger.error("Could not write output file: %s", e)
        sys.exit(ExitCodes.FILE_ERROR.value)


def main(argv=None) -> int:
    """Main function of the program."""
    args = parse_args(argv)
    _setup_logging(args)

    config = CompatConfig.from_args(args, load_config(getattr(args, "CONFIG", None)))
    if not config.versions:
        logger.error("No Node.js versions given; use -n/--node or 'versions' in the config file")
        return ExitCodes.USAGE_ERROR.value

    try:
        payload = asyncio.run(run(config))
    except ValueError as e:
        logger.error("%s", e)
        return ExitCodes.USAGE_ERROR.value
    except RetrievalError as e:
        logger.error("%s: %s", e, e.__cause__)
        return ExitCodes.CONNECTION_ERROR.value
    except (StructuralError, UnknownRuntimeError) as e:
        logger.error("%s", e)
        return ExitCodes.DATA_ERROR.value

    write_output(payload, getattr(args, "OUTPUT", None))
    return ExitCodes.SUCCESS.value


if __name__ == "__main__":
    sys.exit(main())
