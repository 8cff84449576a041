import logging

import numpy as np
import pytest
import torch

from popbits.datasets import vectors
from popbits.sampling.errors import InvalidRequest
from popbits.utils import loggingx


@pytest.mark.parametrize(
    "width, dtype",
    [(8, np.uint8), (16, np.uint16), (32, np.uint32), (64, np.uint64), (128, object)],
)
def test_sample_values_dtype_and_weights(width, dtype):
    k = width // 4
    values = vectors.sample_values(50, width, k, rng=3)
    assert values.shape == (50,)
    assert values.dtype == np.dtype(dtype)
    hist = vectors.weight_histogram(values, width)
    assert hist[k] == 50
    assert hist.sum() == 50


def test_sample_values_is_reproducible_and_handles_empty_batches():
    a = vectors.sample_values(20, 64, 10, rng=np.random.default_rng(5))
    b = vectors.sample_values(20, 64, 10, rng=np.random.default_rng(5))
    assert a.tolist() == b.tolist()
    assert vectors.sample_values(0, 16, 3).shape == (0,)
    with pytest.raises(ValueError):
        vectors.sample_values(-1, 16, 3)


def test_sample_dataset_bits():
    out = vectors.sample_dataset(30, {"width": 64, "popcount": 7, "as_bits": True}, seed=1)
    assert isinstance(out, torch.Tensor)
    assert out.shape == (30, 64)
    assert out.dtype == torch.float32
    assert torch.all(out.sum(dim=1) == 7)


def test_sample_dataset_values():
    out = vectors.sample_dataset(10, {"width": 32, "popcount": 31}, seed=2)
    assert out.shape == (10,)
    assert out.dtype == torch.int64
    for v in out.tolist():
        assert bin(v).count("1") == 31
        assert 0 <= v < 1 << 32


def test_sample_dataset_rejects_values_too_wide_for_int64():
    with pytest.raises(ValueError):
        vectors.sample_dataset(1, {"width": 64, "popcount": 3})


def test_dataset_config_validation():
    assert vectors.validate_dataset_config({}) == vectors.DEFAULT_DATASET_CONFIG
    with pytest.raises(ValueError, match="Unknown dataset config keys"):
        vectors.validate_dataset_config({"width": 8, "p": 0.1})
    with pytest.raises(InvalidRequest):
        vectors.validate_dataset_config({"width": 8, "popcount": 9})
    with pytest.raises(InvalidRequest):
        vectors.sample_dataset(1, {"split": "modulo"})


def test_sample_dataset_logs_request(caplog):
    with caplog.at_level(logging.INFO, logger=loggingx.ROOT_NAME):
        vectors.sample_dataset(2, {"width": 16, "popcount": 4}, seed=0)
    assert "popcount 4" in caplog.text
