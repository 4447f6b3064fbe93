"""Seed file loading for the SafeDict toolkit."""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from ..exceptions import InvalidArgument
from .schema import SeedSchema

log = logging.getLogger(__name__)


def load_seed(seed_path: Path) -> SeedSchema:
    """Load and validate a YAML seed file.

    Args:
        seed_path: Path to the seed file

    Returns:
        SeedSchema instance. An empty file yields a seed with no entries.

    Raises:
        FileNotFoundError: If the seed file does not exist
        InvalidArgument: If the file is not valid YAML or fails schema validation
    """
    seed_path = Path(seed_path)
    if not seed_path.exists():
        raise FileNotFoundError(f"Seed file not found: {seed_path}")

    try:
        with open(seed_path, "r") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise InvalidArgument(f"Invalid seed file format: {e}") from e

    if not isinstance(data, dict):
        raise InvalidArgument(f"Seed file must contain a mapping at the top level, got {type(data).__name__}")

    try:
        seed = SeedSchema.model_validate(data)
    except ValidationError as e:
        # Convert Pydantic errors to user-friendly messages
        friendly_errors = []
        for error in e.errors():
            field = ".".join(str(loc) for loc in error["loc"])
            msg = error["msg"]
            if error["type"] == "extra_forbidden":
                friendly_errors.append(f"{field}: Unknown field (expected 'entries' or 'description')")
            else:
                friendly_errors.append(f"{field}: {msg}")

        raise InvalidArgument("Seed validation failed:\n• " + "\n• ".join(friendly_errors)) from e

    log.debug("Validated seed %s with %d entries", seed_path, len(seed.entries))
    return seed
