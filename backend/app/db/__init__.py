from .storage import JsonRecordFile

__all__ = ["JsonRecordFile"]
