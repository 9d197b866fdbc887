# mirror <sysexits.h>
EXIT_OK = 0  # Normal success, or a stage failure outside production mode
EXIT_FAILURE = 1  # A stage failed in production mode
EXIT_USAGE = 64  # Wrong number of arguments or wrong file extension
EXIT_CONFIG = 78  # Invalid [tool.scss-powertools] settings

__all__ = ["EXIT_CONFIG", "EXIT_FAILURE", "EXIT_OK", "EXIT_USAGE"]
