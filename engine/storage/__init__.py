from .kv_store import KeyValueStore, default_data_dir

__all__ = ["KeyValueStore", "default_data_dir"]
