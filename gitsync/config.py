"""Sync configuration management."""

import json
import logging
from dataclasses import dataclass, field, asdict, fields
from pathlib import Path

from .output.conflicts import DEFAULT_CONFLICT_KEYWORDS

logger = logging.getLogger(__name__)

CONFIG_DIR = ".gitsync"
CONFIG_FILE = "config.json"


@dataclass
class SyncConfig:
    stash_marker: str = "UnityToolbarAuto"
    fallback_branch: str = "develop"
    init_timeout: float | None = 20.0
    command_timeout: float | None = None
    conflict_keywords: list[str] = field(default_factory=lambda: list(DEFAULT_CONFLICT_KEYWORDS))
    open_gui_client: bool = True
    client_search_roots: list[str] = field(default_factory=list)

    @classmethod
    def load(cls, repo_path: Path) -> "SyncConfig":
        config_path = repo_path / CONFIG_DIR / CONFIG_FILE
        if config_path.exists():
            data = json.loads(config_path.read_text(encoding="utf-8"))
            return cls._from_dict(data)
        return cls()

    @classmethod
    def _from_dict(cls, data: dict) -> "SyncConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            logger.warning(f"Ignoring unknown config keys: {', '.join(sorted(unknown))}")
        return cls(**{k: v for k, v in data.items() if k in known})

    def save(self, repo_path: Path) -> None:
        config_dir = repo_path / CONFIG_DIR
        config_dir.mkdir(exist_ok=True)
        config_path = config_dir / CONFIG_FILE
        config_path.write_text(json.dumps(asdict(self), indent=2, ensure_ascii=False), encoding="utf-8")
