"""
Publishing of normalized answers: static JSON files (batch) or HTTP responses (on demand).
"""

from publish.sink import BaseSink, FileSink, ResponseSink, dump_answer, json_safe

__all__ = ["BaseSink", "FileSink", "ResponseSink", "dump_answer", "json_safe"]
