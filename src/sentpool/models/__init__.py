"""
@file __init__.py
@brief sentpool.models 公共接口：池化函数、策略枚举与 Pooler 模块。
       Public interface for sentpool.models: pooling functions, the strategy
       enum and the Pooler module.
"""

from __future__ import annotations

# ============================================================
# 池化函数 Pooling functions
# ============================================================

from .pooling import (
    PoolingStrategy,
    cls_pool,
    masked_mean_pool,
    pool,
    pool_cls,
    pool_mean,
)

# ============================================================
# 池化模块 Pooling module
# ============================================================

from .pooler import (
    PoolerConfig,
    Pooler,
)

__all__ = [
    "PoolingStrategy",
    "cls_pool",
    "masked_mean_pool",
    "pool",
    "pool_cls",
    "pool_mean",
    "PoolerConfig",
    "Pooler",
]
