"""Skill set expander for skillsets.yaml."""
import logging
from pathlib import Path
from typing import Any, Dict, List

import yaml

from ccskill.core.errors import ConfigInvalidError, ConfigMissingError, SetNotFoundError

logger = logging.getLogger(__name__)


def _parse_set(set_name: Any, members: Any) -> List[str]:
    """
    Validate one skill set entry.

    Accepts both block and flow style lists:

        writing:
          - proofread
          - summarize

        writing: [proofread, summarize]

    Args:
        set_name: Key from the document
        members: Value for that key

    Returns:
        Skill names in document order

    Raises:
        ConfigInvalidError: If the entry is not a list of strings
    """
    if not isinstance(set_name, str):
        raise ConfigInvalidError(
            f"Invalid skill set name: {set_name!r} (expected a string)"
        )

    if members is None:
        return []

    if not isinstance(members, list):
        raise ConfigInvalidError(
            f"Invalid skill set '{set_name}': "
            f"expected a list of skill names, got {type(members).__name__}"
        )

    names = []
    for member in members:
        if not isinstance(member, str) or not member:
            raise ConfigInvalidError(
                f"Invalid entry in skill set '{set_name}': {member!r} "
                "(expected a skill name)"
            )
        names.append(member)

    return names


def load_skillsets(config_path: Path) -> Dict[str, List[str]]:
    """
    Load and validate the skill set document.

    The whole document is validated before anything is returned.

    Args:
        config_path: Path to skillsets.yaml

    Returns:
        Mapping of set name to ordered skill names, in document order

    Raises:
        ConfigMissingError: If the document doesn't exist
        ConfigInvalidError: If the document is malformed
    """
    if not config_path.is_file():
        raise ConfigMissingError(config_path)

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigInvalidError(f"Failed to parse {config_path}: {e}") from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ConfigInvalidError(
            f"Invalid skill set file {config_path}: "
            f"expected a mapping of set names, got {type(data).__name__}"
        )

    skillsets = {name: _parse_set(name, members) for name, members in data.items()}
    logger.debug("Loaded %d skill set(s) from %s", len(skillsets), config_path)
    return skillsets


def expand(config_path: Path, set_name: str) -> List[str]:
    """
    Expand a named skill set into its skill names.

    Args:
        config_path: Path to skillsets.yaml
        set_name: Key of the set to expand

    Returns:
        Skill names in the order they are listed

    Raises:
        ConfigMissingError: If the document doesn't exist
        ConfigInvalidError: If the document is malformed
        SetNotFoundError: If the set is not defined
    """
    skillsets = load_skillsets(config_path)

    if set_name not in skillsets:
        raise SetNotFoundError(set_name, available=list(skillsets))

    return list(skillsets[set_name])
