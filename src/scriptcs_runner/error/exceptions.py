"""
Centralized exception definitions for the ScriptCS runner.
"""

class ErrorContext:
    """Context information for errors."""
    
    def __init__(self, component: str = None, operation: str = None, **kwargs):
        self.component = component
        self.operation = operation
        self.details = kwargs

class ScriptRunnerError(Exception):
    """Base class for all runner errors."""
    
    def __init__(self, message: str, context: ErrorContext = None, details: dict = None):
        super().__init__(message)
        self.context = context or ErrorContext()
        self.details = details or {}
        
    def __str__(self):
        base_str = super().__str__()
        if self.context.component and self.context.operation:
            return f"{base_str} [in {self.context.component}.{self.context.operation}]"
        return base_str

class ConfigurationError(ScriptRunnerError):
    """Error in configuration."""
    pass

class ExecutionError(ScriptRunnerError):
    """Error during script execution."""
    pass

class LaunchError(ExecutionError):
    """The interpreter process could not be created."""
    pass

class ScriptMaterializationError(ExecutionError):
    """The inline script could not be written to a temporary file."""
    pass
