"""Adapters connecting inputid to external tree libraries."""
