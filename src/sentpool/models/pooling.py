"""
@file pooling.py
@brief 序列池化函数集合，将编码器输出的 (B, L, H) token 嵌入压缩为 (B, H) 句向量。
       Pooling functions that reduce (B, L, H) token embeddings from an encoder
       into (B, H) sentence embeddings.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Optional, Union

import torch
from torch import Tensor

from sentpool.exceptions import (
    EmptySequenceError,
    InvalidMaskError,
    PoolingError,
    ShapeMismatchError,
)
from sentpool.utils.logging import get_logger

logger = get_logger(__name__)


class PoolingStrategy(str, Enum):
    """
    @brief 池化策略枚举：CLS 取首 token，MEAN 为基于掩码的平均。
           Pooling strategy: CLS takes the first token, MEAN averages unmasked tokens.
    """

    CLS = "cls"
    MEAN = "mean"

    @classmethod
    def parse(cls, value: Union[str, "PoolingStrategy"]) -> "PoolingStrategy":
        """
        @brief 将字符串（大小写不敏感）或枚举成员解析为 PoolingStrategy。
               Parse a case-insensitive name or a member into a PoolingStrategy.
        @param value 策略名或枚举成员。Strategy name or member.
        @return 对应的枚举成员。Matching enum member.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if member.value == key:
                    return member
        choices = ", ".join(repr(m.value) for m in cls)
        raise ValueError(f"Unknown pooling strategy: {value!r} (expected one of {choices})")


def _as_tensor(x: Any) -> Tensor:
    # numpy 数组等输入统一转成 Tensor；不复制也不修改调用方存储
    # Accept numpy arrays and the like without copying or touching caller storage
    return x if isinstance(x, Tensor) else torch.as_tensor(x)


def _as_embeddings(token_embeddings: Any) -> Tensor:
    x = _as_tensor(token_embeddings)
    if x.dim() != 3:
        raise ShapeMismatchError(
            f"Expected 3D token embeddings (B, L, H), got shape {tuple(x.shape)}",
            embeddings_shape=x.shape,
        )
    if not torch.is_floating_point(x):
        x = x.to(torch.float32)
    return x


def cls_pool(token_embeddings: Any) -> Tensor:
    """
    @brief 取序列第 0 个位置（[CLS] 等汇总 token）作为句向量。
           Use the token at position 0 (the [CLS]-style summary token) as the
           sentence embedding.
    @param token_embeddings token 嵌入，形状 (B, L, H)。Token embeddings of shape (B, L, H).
    @return 新分配的 (B, H) 张量，与输入不共享存储。
            Freshly allocated (B, H) tensor that shares no storage with the input.
    @note L == 0 时抛出 EmptySequenceError。Raises EmptySequenceError when L == 0.
    """
    x = _as_embeddings(token_embeddings)
    if x.size(1) == 0:
        raise EmptySequenceError(
            f"CLS pooling needs at least one token, got shape {tuple(x.shape)}"
        )
    return x[:, 0, :].clone()


def masked_mean_pool(
    token_embeddings: Any,
    attention_mask: Any,
    validate_mask: bool = False,
) -> Tensor:
    """
    @brief 基于 attention_mask 的平均池化，只统计有效 token。
           Mean pooling over the positions the attention mask marks as valid.
    @param token_embeddings token 嵌入，形状 (B, L, H)。Token embeddings of shape (B, L, H).
    @param attention_mask 掩码，形状 (B, L)，1 表示有效 token，0 表示 padding。
           Mask of shape (B, L), 1 for real tokens and 0 for padding.
    @param validate_mask 为 True 时拒绝 {0, 1} 以外的掩码值；否则这些值被当作权重。
           If True, reject mask values outside {0, 1}; otherwise they act as weights.
    @return 新分配的 (B, H) 张量。Freshly allocated (B, H) tensor.
    @note 全为 0 的掩码行输出零向量，而不是 NaN/Inf，也不报错。
          A mask row of all zeros yields a zero vector rather than NaN/Inf, and
          is not an error.
    """
    x = _as_embeddings(token_embeddings)
    mask = _as_tensor(attention_mask)

    # expand() 会把 batch=1 的掩码静默广播，因此先显式比较 (B, L)
    # expand() would silently broadcast a batch-1 mask, so compare (B, L) first
    if mask.dim() != 2 or tuple(mask.shape) != tuple(x.shape[:2]):
        raise ShapeMismatchError(
            f"Attention mask shape {tuple(mask.shape)} does not match "
            f"token embeddings (B, L) = {tuple(x.shape[:2])}",
            embeddings_shape=x.shape,
            mask_shape=mask.shape,
        )

    if validate_mask and not bool(((mask == 0) | (mask == 1)).all()):
        raise InvalidMaskError(
            f"Attention mask must only contain 0 and 1, got values {torch.unique(mask).tolist()}"
        )

    mask_expanded = mask.to(device=x.device).unsqueeze(-1).expand(x.shape).to(x.dtype)  # (B, L, H)

    sum_embeddings = (x * mask_expanded).sum(dim=1)  # (B, H)
    sum_mask = mask_expanded.sum(dim=1)  # (B, H)

    degenerate = sum_mask == 0
    if logger.isEnabledFor(logging.DEBUG) and bool(degenerate.any()):
        logger.debug(
            "%d of %d rows have no valid tokens; pooling them to zero vectors.",
            int(degenerate.all(dim=1).sum()),
            x.size(0),
        )
    # 除零保护：恰为 0 的计数替换为 1.0
    # Division guard: counts of exactly 0 become 1.0
    sum_mask = torch.where(degenerate, torch.ones_like(sum_mask), sum_mask)

    return sum_embeddings / sum_mask


def pool(
    token_embeddings: Any,
    attention_mask: Optional[Any] = None,
    strategy: Union[str, PoolingStrategy] = PoolingStrategy.MEAN,
    validate_mask: bool = False,
) -> Tensor:
    """
    @brief 按策略分派到 cls_pool 或 masked_mean_pool。
           Dispatch to cls_pool or masked_mean_pool by strategy.
    @param token_embeddings token 嵌入 (B, L, H)。Token embeddings (B, L, H).
    @param attention_mask 掩码 (B, L)；MEAN 策略必须提供，CLS 策略忽略。
           Mask (B, L); required for MEAN, ignored by CLS.
    @param strategy 池化策略名或枚举成员。Strategy name or member.
    @param validate_mask 见 masked_mean_pool。See masked_mean_pool.
    @return (B, H) 句向量。(B, H) sentence embeddings.
    """
    strategy = PoolingStrategy.parse(strategy)

    if strategy is PoolingStrategy.CLS:
        return cls_pool(token_embeddings)

    if attention_mask is None:
        raise PoolingError("mean pooling requires attention_mask, but got None.")
    return masked_mean_pool(token_embeddings, attention_mask, validate_mask=validate_mask)


# 与接口文档中的操作名保持一致的别名
# Aliases under the operation names used by callers
pool_cls = cls_pool
pool_mean = masked_mean_pool
