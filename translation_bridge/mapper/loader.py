"""Load mapping tables and the component registry from disk."""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

MAPPING_GLOB = "*-to-*.json"


def _read_json(path: Path) -> Optional[Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Skipping unreadable mapping file {path}: {e}")
        return None


def load_mapping_tables(mappings_dir: Optional[str]) -> Dict[str, Dict[str, Any]]:
    """
    Load every ``source-to-target.json`` table in a directory.

    Args:
        mappings_dir: Directory holding the mapping files

    Returns:
        Dict[str, Dict]: ``{"bootstrap-to-elementor": {source_type: [candidates]}}``.
        Missing directories and bad files yield no entries.
    """
    tables: Dict[str, Dict[str, Any]] = {}
    if not mappings_dir:
        return tables

    directory = Path(mappings_dir)
    if not directory.is_dir():
        logger.info(f"Mappings directory not found: {directory}")
        return tables

    for path in sorted(directory.glob(MAPPING_GLOB)):
        data = _read_json(path)
        if isinstance(data, dict):
            tables[path.stem.lower()] = data

    logger.debug(f"Loaded {len(tables)} mapping tables from {directory}")
    return tables


def load_component_registry(registry_file: Optional[str]) -> Dict[str, Any]:
    """Load universal component definitions, if the registry file exists."""
    if not registry_file:
        return {}

    path = Path(registry_file)
    if not path.is_file():
        return {}

    data = _read_json(path)
    if not isinstance(data, dict):
        return {}
    return data.get("components", data)
