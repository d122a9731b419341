import logging
import sys
from pathlib import Path
from typing import Final
from typing import TextIO

from atom.config import Config
from atom.config import OutputFormat
from atom.models.scan_result import ScanErrorModel
from atom.models.scan_result import ScanResultModel
from atom.models.scan_result import TokenModel
from atom.scanning.scan_error import ScanError
from atom.scanning.scanner import Scanner
from atom.scanning.token import Token

logger: Final = logging.getLogger(__name__)

EXIT_SUCCESS: Final = 0
EXIT_LEXICAL_ERRORS: Final = 1
EXIT_USAGE_ERROR: Final = 2

_JSON_FLAG: Final = "--json"


def scan_source(scanner: Scanner, source_name: str, source: str) -> ScanResultModel:
    scanner.provide(source_name, source)
    tokens: Final[list[TokenModel]] = []
    errors: Final[list[ScanErrorModel]] = []
    for result in scanner.scan_all():
        match result:
            case Token():
                tokens.append(TokenModel.from_token(result))
            case ScanError():
                errors.append(ScanErrorModel.from_scan_error(result))
    return ScanResultModel(source_name=source_name, tokens=tokens, errors=errors)


def print_scan_result(
    scan_result: ScanResultModel,
    output_format: OutputFormat,
    *,
    out: TextIO,
    err: TextIO,
) -> None:
    match output_format:
        case OutputFormat.JSON:
            print(scan_result.model_dump_json(indent=2), file=out)
        case OutputFormat.TEXT:
            for token in scan_result.tokens:
                print(f"{token.line}:{token.column} {token.type} {token.lexeme!r}", file=out)
            for error in scan_result.errors:
                print(
                    f"{scan_result.source_name}:{error.line}:{error.column}: error: {error.message}",
                    file=err,
                )


def run(args: list[str], *, out: TextIO = sys.stdout, err: TextIO = sys.stderr) -> int:
    paths: Final = [Path(arg) for arg in args if arg != _JSON_FLAG]
    if not paths:
        print(f"Usage: atom-scan [{_JSON_FLAG}] FILE...", file=err)
        return EXIT_USAGE_ERROR

    try:
        config: Final = Config()
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=err)
        return EXIT_USAGE_ERROR

    logging.basicConfig(level=config.log_level)
    output_format: Final = OutputFormat.JSON if _JSON_FLAG in args else config.output_format

    scanner: Final = Scanner(source_name="", source="")
    exit_code = EXIT_SUCCESS
    for path in paths:
        logger.info(f"Scanning {path} (encoding: {config.source_encoding}).")
        try:
            source = path.read_text(encoding=config.source_encoding)
        except (OSError, ValueError) as e:
            logger.error(f"Unable to read {path}: {e}")
            return EXIT_USAGE_ERROR
        scan_result = scan_source(scanner, str(path), source)
        if scan_result.errors:
            logger.info(f"Found {len(scan_result.errors)} lexical error(s) in {path}.")
            exit_code = EXIT_LEXICAL_ERRORS
        print_scan_result(scan_result, output_format, out=out, err=err)
    return exit_code


def main() -> None:
    sys.exit(run(sys.argv[1:]))


if __name__ == "__main__":
    main()
