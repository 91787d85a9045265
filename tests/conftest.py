"""Common test fixtures for sentpool."""

import logging
from collections.abc import Callable, Generator

import pytest
import torch

from sentpool.utils.logging import set_level


@pytest.fixture
def scenario_embeddings() -> torch.Tensor:
    """B=1, L=3, H=2 token embeddings [[1, 2], [3, 4], [5, 6]]."""
    return torch.tensor([[[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]]], dtype=torch.float32)


@pytest.fixture
def random_batch() -> tuple[torch.Tensor, torch.Tensor]:
    """Random (4, 7, 5) embeddings with a ragged right-padded mask."""
    generator = torch.Generator().manual_seed(1234)
    embeddings = torch.randn(4, 7, 5, generator=generator)
    lengths = torch.tensor([7, 3, 1, 5])
    mask = (torch.arange(7).unsqueeze(0) < lengths.unsqueeze(1)).to(torch.int64)
    return embeddings, mask


class RecordCollector(logging.Handler):
    """Keep every record emitted to the logger it is attached to."""

    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


@pytest.fixture
def collect_records() -> Generator[Callable[[str], RecordCollector], None, None]:
    """Attach a collecting handler to a named logger; detached after the test."""
    attached: list[tuple[logging.Logger, RecordCollector]] = []

    def attach(name: str) -> RecordCollector:
        collector = RecordCollector()
        logger = logging.getLogger(name)
        logger.addHandler(collector)
        attached.append((logger, collector))
        return collector

    yield attach

    for logger, collector in attached:
        logger.removeHandler(collector)
    set_level(logging.INFO)
