"""
@file __init__.py
@brief sentpool 顶层公共接口：将编码器 token 嵌入池化为定长句向量。
       Top-level public API for sentpool: pool encoder token embeddings into
       fixed-size sentence embeddings.
"""

from __future__ import annotations

# ------------------------------
# Models 池化函数与模块
# ------------------------------
from .models import (  # type: ignore[F401]
    PoolingStrategy,
    cls_pool,
    masked_mean_pool,
    pool,
    pool_cls,
    pool_mean,
    PoolerConfig,
    Pooler,
)

# ------------------------------
# Exceptions 异常
# ------------------------------
from .exceptions import (  # type: ignore[F401]
    PoolingError,
    ShapeMismatchError,
    EmptySequenceError,
    InvalidMaskError,
)

# ------------------------------
# Utils 日志与配置
# ------------------------------
from .utils import (  # type: ignore[F401]
    get_logger,
    set_level,
    info,
    warn,
    error,
)
from .utils.configs import (  # type: ignore[F401]
    build_pooler_config,
    load_pooler_config,
    load_config,
)

__version__ = "0.1.0"

__all__ = [
    # --- 池化 --- #
    "PoolingStrategy",
    "cls_pool",
    "masked_mean_pool",
    "pool",
    "pool_cls",
    "pool_mean",
    "PoolerConfig",
    "Pooler",
    # --- 异常 --- #
    "PoolingError",
    "ShapeMismatchError",
    "EmptySequenceError",
    "InvalidMaskError",
    # --- 工具 --- #
    "get_logger",
    "set_level",
    "info",
    "warn",
    "error",
    "build_pooler_config",
    "load_pooler_config",
    "load_config",
]
