"""
@file pooler.py
@brief 无参数的池化模块：按配置选择 CLS 或掩码平均池化，可直接接在编码器输出之后。
       Parameter-free pooling module that applies CLS or masked mean pooling per
       its config, meant to sit right after an encoder's output.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union

from torch import Tensor, nn

from sentpool.models.pooling import PoolingStrategy, pool
from sentpool.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class PoolerConfig:
    """
    @brief 池化模块配置。Pooler configuration.
    @param strategy 池化策略："cls" 取首 token；"mean" 为基于 attention_mask 的平均。
           Pooling strategy: "cls" takes the first token; "mean" averages over
           tokens marked valid by the attention mask.
    @param validate_mask 是否拒绝 {0, 1} 以外的掩码值（仅 mean 策略生效）。
           Whether to reject mask values outside {0, 1} (mean strategy only).
    """

    strategy: str = "mean"
    validate_mask: bool = False


class Pooler(nn.Module):
    """
    @brief 将 (B, L, H) token 嵌入池化为 (B, H) 句向量。
           Pool (B, L, H) token embeddings into (B, H) sentence embeddings.

    @note
        - 模块不持有参数与状态，可在多线程间共享。
          The module holds no parameters or state and can be shared across threads.
        - 不做 L2 归一化等后处理，由下游负责。
          No post-processing such as L2 normalization; that is left downstream.
    """

    def __init__(self, cfg: Optional[PoolerConfig] = None) -> None:
        super().__init__()
        self.cfg = cfg if cfg is not None else PoolerConfig()
        # 构造时即校验策略名，避免在前向时才失败
        # Validate the strategy name up front rather than on the first forward
        self._strategy = PoolingStrategy.parse(self.cfg.strategy)

        logger.info(
            "Pooler initialized with strategy=%s, validate_mask=%s",
            self._strategy.value,
            self.cfg.validate_mask,
        )

    @classmethod
    def from_name(
        cls,
        strategy: Union[str, PoolingStrategy],
        validate_mask: bool = False,
    ) -> "Pooler":
        """
        @brief 由策略名直接构造 Pooler。Build a Pooler straight from a strategy name.
        """
        strategy = PoolingStrategy.parse(strategy)
        return cls(PoolerConfig(strategy=strategy.value, validate_mask=validate_mask))

    @property
    def strategy(self) -> PoolingStrategy:
        return self._strategy

    def forward(
        self,
        token_embeddings: Any,
        attention_mask: Optional[Any] = None,
    ) -> Tensor:
        """
        @brief 对编码器输出做池化。Pool the encoder output.
        @param token_embeddings 形状 (B, L, H) 的 token 嵌入。Token embeddings of shape (B, L, H).
        @param attention_mask 形状 (B, L) 的掩码；mean 策略必须提供。
               Mask of shape (B, L); required by the mean strategy.
        @return 形状 (B, H) 的句向量。Sentence embeddings of shape (B, H).
        """
        return pool(
            token_embeddings,
            attention_mask,
            strategy=self._strategy,
            validate_mask=self.cfg.validate_mask,
        )

    def extra_repr(self) -> str:
        return f"strategy={self._strategy.value}, validate_mask={self.cfg.validate_mask}"
