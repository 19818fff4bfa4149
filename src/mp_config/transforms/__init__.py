"""Transforms – post-merge value transforms."""
from mp_config.transforms.coercion import coerce_mapping, coerce_value

__all__ = ["coerce_mapping", "coerce_value"]
