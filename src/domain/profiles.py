import logging
import os
from pathlib import Path

import tomlkit

from domain.models import TilerConfig
from domain.toml_sections import flat_to_sectioned, sectioned_to_flat
from shared.constants import PROFILES_DIR_DEFAULT, PROFILES_DIR_ENV

logger = logging.getLogger(__name__)


def _user_profiles_dir() -> Path:
    """
    Determine profiles directory.

    1) TILEGRID_PROFILES_DIR when set.
    2) Otherwise ~/.tilegrid/profiles.
    """
    env_dir = os.getenv(PROFILES_DIR_ENV)
    if env_dir:
        return Path(env_dir)
    return Path.home() / PROFILES_DIR_DEFAULT


def ensure_profiles_dir() -> Path:
    profiles_dir = _user_profiles_dir()
    profiles_dir.mkdir(parents=True, exist_ok=True)
    return profiles_dir


def list_profiles() -> list[str]:
    """Profile names without the .toml extension."""
    folder = ensure_profiles_dir()
    return sorted(p.stem for p in folder.glob('*.toml') if p.is_file())


def profile_path(name: str) -> Path:
    return ensure_profiles_dir() / f'{name}.toml'


def load_profile(name_or_path: str) -> TilerConfig:
    """
    Load and validate a TOML profile into TilerConfig.

    Accepts either a profile name (without .toml) from the profiles directory
    or a path to an existing TOML file. Both sectioned and flat TOML layouts
    are understood.
    """
    p = Path(name_or_path)
    path = (
        p if p.suffix.lower() == '.toml' and p.exists() else profile_path(name_or_path)
    )
    if not path.exists():
        msg = f'Profile not found: {path}'
        raise FileNotFoundError(msg)
    data = tomlkit.parse(path.read_text(encoding='utf-8')).unwrap()
    config = TilerConfig.model_validate(sectioned_to_flat(data))
    logger.info(
        'Loaded profile %s: tile_size=%s zoom=%s..%s margin=%s skip_null_island=%s',
        path,
        config.tile_size,
        config.zoom_min,
        config.zoom_max,
        config.margin,
        config.skip_null_island,
    )
    return config


def save_profile(name: str, config: TilerConfig) -> Path:
    """Write a profile as sectioned TOML (no atomic replace, no backups)."""
    path = profile_path(name)
    text = tomlkit.dumps(flat_to_sectioned(config.model_dump()))
    path.write_text(text, encoding='utf-8')
    logger.info('Saved profile %s', path)
    return path


def delete_profile(name: str) -> None:
    """Remove a profile file if it exists."""
    path = profile_path(name)
    if path.exists():
        path.unlink()
        logger.info('Deleted profile %s', path)
