"""
spellchk Configuration Module
=============================
Run configuration for the checker.

Settings are resolved in priority order:
1. Command line arguments
2. Environment variables (SPELLCHK_LANGUAGE, SPELLCHK_MAX_SUGGESTIONS, SPELLCHK_PERSONAL_DICT)
3. Local config file (.spellchk.json in the working directory)
4. Global config file (<config dir>/config.json)
5. Defaults

The result is an immutable ``SpellchkConfig`` passed to the checker.
"""

import os
import json
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Tuple, Union
from dataclasses import dataclass, field

from config_logging import get_logger, ConfigError, FileError, ValidationError

logger = get_logger('config')

LOCAL_CONFIG_FILE = ".spellchk.json"
GLOBAL_CONFIG_FILE = "config.json"
PERSONAL_DICT_FILE = "personal.txt"

DEFAULT_LANGUAGE = "en_US"
DEFAULT_MAX_SUGGESTIONS = 5
DEFAULT_IGNORE_PATTERNS = (
    r'\b[A-Z0-9_]{2,}\b',                                   # ALL_CAPS constants
    r'https?://\S+',                                        # URLs
    r'\b[a-fA-F0-9]{32,}\b',                                # hashes
    r'[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}',     # e-mail addresses
)


def data_dir() -> Path:
    """Directory holding dictionaries and logs."""
    override = os.environ.get('SPELLCHK_DATA_DIR')
    if override:
        return Path(override)
    base = os.environ.get('XDG_DATA_HOME') or Path.home() / '.local' / 'share'
    return Path(base) / 'spellchk'


def config_dir() -> Path:
    """Directory holding the global config file and the personal dictionary."""
    override = os.environ.get('SPELLCHK_CONFIG_DIR')
    if override:
        return Path(override)
    base = os.environ.get('XDG_CONFIG_HOME') or Path.home() / '.config'
    return Path(base) / 'spellchk'


@dataclass(frozen=True)
class SpellchkConfig:
    """Immutable settings for one run."""
    language: str = DEFAULT_LANGUAGE
    personal_dictionary: Optional[Path] = None
    ignore_patterns: Tuple[str, ...] = DEFAULT_IGNORE_PATTERNS
    max_suggestions: int = DEFAULT_MAX_SUGGESTIONS
    data_dir: Path = field(default_factory=data_dir)

    def __post_init__(self):
        if self.max_suggestions < 1:
            raise ValidationError(
                f"max_suggestions must be at least 1, got {self.max_suggestions}",
                field='max_suggestions'
            )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'language': self.language,
            'personal_dictionary': str(self.personal_dictionary) if self.personal_dictionary else None,
            'ignore_patterns': list(self.ignore_patterns),
            'max_suggestions': self.max_suggestions,
            'data_dir': str(self.data_dir),
        }


def _read_config_file(path: Path) -> Dict[str, Any]:
    """Read a JSON config file; a missing file is an empty config."""
    if not path.is_file():
        return {}
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise ConfigError(f"Cannot read config file {path}: {e}", path=str(path))

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object", path=str(path))
    logger.debug("Config file loaded", path=str(path), keys=sorted(data))
    return data


def _apply_dict_to_config(values: Dict[str, Any], data: Dict[str, Any], source: Path):
    """Apply the known keys of a config file to ``values``."""
    try:
        if 'language' in data:
            values['language'] = str(data['language'])
        if 'personal_dictionary' in data and data['personal_dictionary']:
            values['personal_dictionary'] = Path(data['personal_dictionary']).expanduser()
        if 'ignore_patterns' in data:
            patterns = data['ignore_patterns']
            if not isinstance(patterns, list):
                raise TypeError("ignore_patterns must be a list")
            values['ignore_patterns'] = tuple(str(p) for p in patterns)
        if 'max_suggestions' in data:
            values['max_suggestions'] = int(data['max_suggestions'])
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid value in config file {source}: {e}", path=str(source))


def _apply_env_to_config(values: Dict[str, Any]):
    """Apply environment variables to ``values``."""
    env_mappings = {
        'SPELLCHK_LANGUAGE': ('language', str),
        'SPELLCHK_MAX_SUGGESTIONS': ('max_suggestions', int),
        'SPELLCHK_PERSONAL_DICT': ('personal_dictionary', lambda v: Path(v).expanduser()),
    }

    for env_var, (key, converter) in env_mappings.items():
        value = os.environ.get(env_var)
        if value:
            try:
                values[key] = converter(value)
            except ValueError as e:
                logger.warning(f"Ignoring invalid environment variable {env_var}",
                               value=value, error=str(e))


def load_config(
    language: Optional[str] = None,
    personal_dictionary: Optional[Union[str, Path]] = None,
    extra_patterns: Iterable[str] = (),
    max_suggestions: Optional[int] = None,
    local_path: Optional[Union[str, Path]] = None
) -> SpellchkConfig:
    """
    Resolve the run configuration.

    Args:
        language: Dictionary language from the command line
        personal_dictionary: Personal dictionary path from the command line
        extra_patterns: Ignore patterns added on the command line
        max_suggestions: Suggestion limit from the command line
        local_path: Local config file (defaults to ./.spellchk.json)

    Raises:
        ConfigError: a config file is unreadable or malformed
        ValidationError: the resulting max_suggestions is below 1
    """
    values: Dict[str, Any] = {
        'language': DEFAULT_LANGUAGE,
        'personal_dictionary': config_dir() / PERSONAL_DICT_FILE,
        'ignore_patterns': DEFAULT_IGNORE_PATTERNS,
        'max_suggestions': DEFAULT_MAX_SUGGESTIONS,
    }

    global_path = config_dir() / GLOBAL_CONFIG_FILE
    _apply_dict_to_config(values, _read_config_file(global_path), global_path)

    local = Path(local_path) if local_path else Path.cwd() / LOCAL_CONFIG_FILE
    _apply_dict_to_config(values, _read_config_file(local), local)

    _apply_env_to_config(values)

    if language:
        values['language'] = language
    if personal_dictionary:
        values['personal_dictionary'] = Path(personal_dictionary).expanduser()
    if max_suggestions is not None:
        values['max_suggestions'] = max_suggestions

    extra = tuple(extra_patterns)
    if extra:
        values['ignore_patterns'] = tuple(values['ignore_patterns']) + extra

    return SpellchkConfig(data_dir=data_dir(), **values)


def ensure_personal_dictionary(config: SpellchkConfig) -> Optional[Path]:
    """Create the personal dictionary file (and its directory) if it does not exist yet."""
    path = config.personal_dictionary
    if path is None:
        return None
    if path.exists():
        return path

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("# spellchk personal dictionary, one word per line\n", encoding='utf-8')
    except OSError as e:
        raise FileError(f"Cannot create personal dictionary {path}: {e}", filename=str(path))

    logger.info("Personal dictionary created", path=str(path))
    return path
