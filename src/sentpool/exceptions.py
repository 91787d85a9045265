"""
@file exceptions.py
@brief 池化相关的异常类型。所有异常均为前置条件违规，调用方需要修正输入，不应重试。
       Pooling exceptions. All of them are precondition violations the caller
       must fix; none is transient.
"""

from __future__ import annotations

from typing import Sequence


class PoolingError(ValueError):
    """
    @brief 池化错误基类。Base class for pooling errors.
    """


class ShapeMismatchError(PoolingError):
    """
    @brief 嵌入与掩码的秩或 (B, L) 维度不一致。
           Rank or (B, L) disagreement between embeddings and mask.
    """

    def __init__(
        self,
        message: str,
        embeddings_shape: Sequence[int] = (),
        mask_shape: Sequence[int] = (),
    ) -> None:
        self.embeddings_shape = tuple(embeddings_shape)
        self.mask_shape = tuple(mask_shape)
        super().__init__(message)


class EmptySequenceError(PoolingError, IndexError):
    """
    @brief 序列长度为 0 时无法读取第 0 个位置。
           Sequence length is 0, so position 0 cannot be read.
    """


class InvalidMaskError(PoolingError):
    """Mask holds values outside {0, 1} while strict validation is on."""
