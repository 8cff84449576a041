"""vectors.py - batches of fixed-weight values for test-vector generation"""

import numpy as np
import torch

from popbits.sampling.generate import generate, validate_request
from popbits.sampling.random_source import as_random_source
from popbits.utils import loggingx
from popbits.utils.bit_tools import ints_to_bits, popcount

DEFAULT_DATASET_CONFIG = {
    "width": 32,
    "popcount": 16,
    "split": "exact",
    "as_bits": False,
}

NUMPY_DTYPES = {
    8: np.uint8,
    16: np.uint16,
    32: np.uint32,
    64: np.uint64,
    128: object,
}

logger = loggingx.get_logger(__name__)


def validate_dataset_config(dataset_config):
    """Fill in defaults and reject anything we don't know how to honour.

    Returns:
        a new dict with every key of DEFAULT_DATASET_CONFIG set
    """
    unknown = set(dataset_config) - set(DEFAULT_DATASET_CONFIG)
    if unknown:
        raise ValueError(f"Unknown dataset config keys: {sorted(unknown)}")
    config = dict(DEFAULT_DATASET_CONFIG)
    config.update(dataset_config)
    validate_request(config["width"], config["popcount"])
    return config


def sample_values(n_data, width, k, rng=None, split="exact"):
    """Draw n_data independent width-bit values with k ones each.

    Args:
        n_data: number of values
        width, k: sample request, see `generate`
        rng: shared by every draw in the batch

    Returns:
        (n_data,) array; object dtype for width 128 so values stay exact
    """
    if n_data < 0:
        raise ValueError(f"n_data must be non-negative, got {n_data}")
    validate_request(width, k)
    source = as_random_source(rng)
    values = [generate(width, k, rng=source, split=split) for _ in range(int(n_data))]
    out = np.empty(len(values), dtype=NUMPY_DTYPES[width])
    out[:] = values
    return out


def sample_dataset(n_data, dataset_config, device=None, seed=None):
    """Sample a tensor of test vectors described by dataset_config.

    With `as_bits` the result is an (n_data, width) float32 tensor of 0/1
    entries, bit i in column i. Otherwise it is the (n_data,) int64 tensor of
    raw values, which only works up to width 32 (torch has no unsigned 64-bit
    type to hold them losslessly).
    """
    config = validate_dataset_config(dataset_config)
    width, k = config["width"], config["popcount"]
    if not config["as_bits"] and width > 32:
        raise ValueError(f"width {width} values do not fit an int64 tensor, set as_bits=True")

    logger.info(f"sampling {n_data} values of width {width} with popcount {k} ({config['split']} split)")
    values = sample_values(n_data, width, k, rng=seed, split=config["split"])
    if config["as_bits"]:
        out = torch.tensor(ints_to_bits(values, width), dtype=torch.float32)
    else:
        out = torch.tensor(values.astype(np.int64), dtype=torch.int64)
    if device is not None:
        out = out.to(device)
    return out


def weight_histogram(values, width):
    """Counts of each popcount 0..width among values.

    Returns:
        (width + 1,) int array
    """
    hist = np.zeros(width + 1, dtype=int)
    for v in values:
        hist[popcount(int(v))] += 1
    return hist
