from .copier import FileCopier, ShutilFileCopier

__all__ = ["FileCopier", "ShutilFileCopier"]
