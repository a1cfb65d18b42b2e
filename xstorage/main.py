"""Entry point for the xstorage composition function."""

import logging
import sys
from datetime import timedelta
from pathlib import Path

import yaml
from pydantic import ValidationError

from .config.loader import load_config
from .function import CompositionFunction
from .models import RunFunctionRequest
from .scheme import new_scheme

logger = logging.getLogger(__name__)

USAGE = "usage: xstorage-fn REQUEST [PROJECT_PATH]"


def read_request(source: str) -> RunFunctionRequest:
    """Read a request document (YAML or JSON) from a file, or stdin for '-'."""
    if source == "-":
        data = yaml.safe_load(sys.stdin)
    else:
        with open(source, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    return RunFunctionRequest.model_validate(data or {})


def main(argv: list[str] | None = None) -> int:
    """Run the function once against a request and print the response."""
    args = sys.argv[1:] if argv is None else argv
    if not args or len(args) > 2:
        print(USAGE, file=sys.stderr)
        return 2

    project_path = Path(args[1]).resolve() if len(args) > 1 else Path.cwd()
    config = load_config(project_path)
    logging.basicConfig(
        level=config.settings.log_level.upper(),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        req = read_request(args[0])
    except (OSError, yaml.YAMLError, ValidationError) as e:
        logger.error(f"Cannot read request from {args[0]}: {e}")
        return 2

    # Kinds are registered once here, then handed to the function.
    fn = CompositionFunction(
        settings=config.composition,
        scheme=new_scheme(),
        ttl=timedelta(seconds=config.settings.ttl_seconds),
    )
    rsp = fn.run_function(req)

    # mode="json" ensures Enums are serialized as strings
    yaml.dump(
        rsp.model_dump(exclude_none=True, mode="json"),
        sys.stdout,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )
    return 1 if rsp.is_fatal() else 0


if __name__ == "__main__":
    sys.exit(main())
