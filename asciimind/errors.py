class MindMapError(Exception):
    pass


class ConfigurationError(MindMapError):
    pass


class InvalidOperationError(MindMapError):
    pass


class PersistenceError(MindMapError):
    pass
