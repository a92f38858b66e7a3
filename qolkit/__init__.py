"""Quality-of-life helpers for mappings, sequences and nested maps."""

__version__ = "0.1.21"
__all__ = ["bi_hashmap", "mapping_ops", "recurrent_map", "sequences"]