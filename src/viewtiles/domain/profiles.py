import logging
import os
from pathlib import Path

import tomlkit

from viewtiles.domain.settings import TilingSettings
from viewtiles.shared.constants import (
    PROFILE_SUFFIX,
    PROFILES_DIRNAME,
    PROFILES_ENV_VAR,
)

logger = logging.getLogger(__name__)


def _user_profiles_dir() -> Path:
    """
    Determine profiles directory.

    1) If <project_root>/configs/profiles exists, use it (run-from-repo setups).
    2) Otherwise $VIEWTILES_HOME/profiles, or ~/.viewtiles/profiles when unset.
    """
    project_root = Path(__file__).resolve().parents[3]
    local_profiles = project_root / 'configs' / PROFILES_DIRNAME
    if local_profiles.exists():
        return local_profiles

    home = os.getenv(PROFILES_ENV_VAR)
    base = Path(home) if home else Path.home() / '.viewtiles'
    return base / PROFILES_DIRNAME


def ensure_profiles_dir() -> Path:
    profiles_dir = _user_profiles_dir()
    profiles_dir.mkdir(parents=True, exist_ok=True)
    return profiles_dir


def list_profiles() -> list[str]:
    """Profile names without extension."""
    folder = ensure_profiles_dir()
    return sorted(p.stem for p in folder.glob(f'*{PROFILE_SUFFIX}') if p.is_file())


def profile_path(name: str) -> Path:
    return ensure_profiles_dir() / f'{name}{PROFILE_SUFFIX}'


def _resolve(name_or_path: str) -> Path:
    p = Path(name_or_path)
    if p.suffix.lower() == PROFILE_SUFFIX and p.exists():
        return p
    return profile_path(name_or_path)


def load_profile(name_or_path: str) -> TilingSettings:
    """
    Load and validate a TOML profile.

    Accepts a profile name from the profiles directory or a path to a .toml file.
    """
    path = _resolve(name_or_path)
    if not path.exists():
        msg = f'Profile not found: {path}'
        raise FileNotFoundError(msg)
    data = tomlkit.parse(path.read_text(encoding='utf-8'))
    settings = TilingSettings.model_validate(data.unwrap())
    logger.info(
        'Loaded tiling profile %s: min_zoom=%s max_zoom=%s',
        path,
        settings.min_zoom,
        settings.max_zoom,
    )
    return settings


def save_profile(name: str, settings: TilingSettings) -> Path:
    path = profile_path(name)
    doc = tomlkit.document()
    # TOML has no null; unrestricted bounds are simply omitted
    for key, value in settings.model_dump(exclude_none=True).items():
        doc[key] = value
    path.write_text(tomlkit.dumps(doc), encoding='utf-8')
    logger.info('Saved tiling profile %s', path)
    return path


def delete_profile(name: str) -> None:
    path = profile_path(name)
    if path.exists():
        path.unlink()
        logger.info('Deleted tiling profile %s', path)
