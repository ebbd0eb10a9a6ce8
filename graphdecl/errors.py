class GraphError(Exception):
    pass


class ConfigurationError(GraphError):
    pass


class ResolverLoadError(GraphError):
    pass


class SchemaGenerationError(GraphError):
    def __init__(self, message, errors=None):
        super().__init__(message)
        if errors is None:
            errors = ()
        self.errors = tuple(errors)
