"""Serialization module: export result records to JSON-compatible formats."""

from fitness_engine.serialization.records import result_to_dict, result_to_json_string

__all__ = ["result_to_dict", "result_to_json_string"]
