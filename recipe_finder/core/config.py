import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from recipe_finder.core.logging_config import get_logger
from recipe_finder.core.rules import DEFAULT_RECOMMENDATION_LIMIT, MIN_SIMILARITY_SCORE

logger = get_logger(__name__)


@dataclass(frozen=True)
class RecommenderConfig:
    default_limit: int = DEFAULT_RECOMMENDATION_LIMIT
    max_limit: int = 50
    min_score: float = MIN_SIMILARITY_SCORE
    workers: int = 1
    cache_ttl_seconds: int = 300
    data_path: str = "data/recipes.json"


# Config key -> environment variable that overrides it.
ENV_OVERRIDES: Dict[str, str] = {
    "default_limit": "RECOMMEND_DEFAULT_LIMIT",
    "max_limit": "RECOMMEND_MAX_LIMIT",
    "min_score": "RECOMMEND_MIN_SCORE",
    "workers": "RECOMMEND_WORKERS",
    "cache_ttl_seconds": "CATALOG_CACHE_TTL",
    "data_path": "RECIPES_DATA_PATH",
}


def _as_int(value: Any, default: int) -> int:
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return default
    return default


def _as_float(value: Any, default: float) -> float:
    if isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return default
    return default


def _project_root() -> Path:
    return Path(__file__).resolve().parents[2]


def _config_path() -> Path:
    return _project_root() / "config" / "recommender_config.json"


def resolve_data_path(data_path: str) -> str:
    """Relative store paths are taken from the project root, like the config file."""
    path = Path(data_path)
    if path.is_absolute():
        return str(path)
    return str(_project_root() / path)


def _read_file(config_path: Path) -> Dict[str, Any]:
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except json.JSONDecodeError as exc:
        logger.warning(f"Invalid recommender config JSON at {config_path}: {exc}")
        return {}
    if not isinstance(data, dict):
        logger.warning(f"Recommender config at {config_path} is not an object, ignoring it.")
        return {}
    return data


def load_config(path: Optional[Path] = None, use_env: bool = True) -> RecommenderConfig:
    """Build the recommender config from the JSON file, then the environment.

    Values that fail to parse fall back to the defaults.
    """
    data = _read_file(path or _config_path())

    if use_env:
        load_dotenv()
        for key, env_name in ENV_OVERRIDES.items():
            env_value = os.getenv(env_name)
            if env_value is not None and env_value.strip():
                data[key] = env_value

    defaults = RecommenderConfig()
    max_limit = max(1, _as_int(data.get("max_limit"), defaults.max_limit))
    default_limit = max(0, _as_int(data.get("default_limit"), defaults.default_limit))
    return RecommenderConfig(
        default_limit=min(default_limit, max_limit),
        max_limit=max_limit,
        min_score=_as_float(data.get("min_score"), defaults.min_score),
        workers=max(1, _as_int(data.get("workers"), defaults.workers)),
        cache_ttl_seconds=max(0, _as_int(data.get("cache_ttl_seconds"), defaults.cache_ttl_seconds)),
        data_path=str(data.get("data_path") or defaults.data_path),
    )
