"""
@file configs.py
@brief 池化配置加载：从 JSON 文件或内置配置名构造 PoolerConfig。
       Pooler config loader: build a PoolerConfig from a JSON file or a bundled
       config name.
"""

from __future__ import annotations

import json
from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, Union

from sentpool.models.pooler import PoolerConfig
from sentpool.utils.logging import get_logger

logger = get_logger(__name__)

CONFIGS_DIR = Path(__file__).resolve().parents[1] / "configs"


def _filter_kwargs(cls: type, raw: Dict[str, Any]) -> Dict[str, Any]:
    """
    @brief 只保留 dataclass 已声明的字段，忽略 JSON 中的多余键。
           Keep only declared dataclass fields, dropping unknown JSON keys.
    """
    if not raw:
        return {}
    valid = {f.name for f in fields(cls)}
    unknown = sorted(set(raw) - valid)
    if unknown:
        logger.warning("Ignoring unknown %s keys: %s", cls.__name__, ", ".join(unknown))
    return {k: v for k, v in raw.items() if k in valid}


def _resolve_config_path(name_or_path: Union[str, Path]) -> Path:
    """
    @brief 将配置名或路径解析为实际 JSON 文件路径。
           Resolve a config name or path into an actual JSON file path.
    @param name_or_path 已存在的文件路径，或 sentpool/configs 下的配置名（可不带 .json）。
           An existing file path, or a config name under sentpool/configs
           (the .json suffix is optional).
    @return 指向 .json 文件的 Path。Path to a .json file.
    """
    p = Path(name_or_path)
    if p.is_file():
        return p.resolve()

    name = str(name_or_path)
    filename = name if name.endswith(".json") else name + ".json"
    candidate = CONFIGS_DIR / filename
    if candidate.is_file():
        return candidate.resolve()

    raise FileNotFoundError(
        f"Config JSON not found: {name_or_path} (tried as path and as {candidate})"
    )


def build_pooler_config(data: Dict[str, Any]) -> PoolerConfig:
    """
    @brief 从字典构造 PoolerConfig；存在嵌套 "pooler" 对象时优先使用它。
           Build a PoolerConfig from a dict, preferring a nested "pooler" object.
    """
    raw = data.get("pooler", data)
    if not isinstance(raw, dict):
        raise ValueError(f'"pooler" must be an object/dict, got: {type(raw)!r}')
    kwargs = _filter_kwargs(PoolerConfig, raw)

    # 只接受布尔值；字符串 "false" 为真值
    # Booleans only; the string "false" is truthy
    validate_mask = kwargs.get("validate_mask", False)
    if not isinstance(validate_mask, bool):
        raise ValueError(
            f'"validate_mask" must be a boolean, got: {validate_mask!r}'
        )
    strategy = kwargs.get("strategy", "mean")
    if not isinstance(strategy, str):
        raise ValueError(f'"strategy" must be a string, got: {strategy!r}')

    return PoolerConfig(**kwargs)


def load_pooler_config(name_or_path: Union[str, Path]) -> PoolerConfig:
    """
    @brief 从 JSON 路径或内置配置名加载 PoolerConfig。
           Load a PoolerConfig from a JSON path or a bundled config name.
    @example
        >>> cfg = load_pooler_config("mean")
        >>> cfg = load_pooler_config("path/to/pooler.json")
    """
    path = _resolve_config_path(name_or_path)
    logger.info("Loading pooler config from: %s", path)

    with path.open("r", encoding="utf-8") as f:
        raw = json.load(f)

    if not isinstance(raw, dict):
        raise ValueError(f"Top-level JSON must be an object/dict, got: {type(raw)!r}")

    return build_pooler_config(raw)


load_config = load_pooler_config
