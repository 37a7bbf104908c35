import logging
from siUnits.DEFAULTS import DEFAULTS


class makeLager:
    """
    Wrapper around the 'siUnits' logger with a console handler and named
    levels.
    """

    _LEVELS = {
        # A level higher than CRITICAL to silence logging
        'silent': logging.CRITICAL + 1,
        'debug': logging.DEBUG,
        'info': logging.INFO,
        'warning': logging.WARNING,
        'error': logging.ERROR,
        'critical': logging.CRITICAL
    }

    def __init__(self, log_level=logging.DEBUG):
        """
        Args:
            log_level (str or int): Initial logging level.
        """
        self.logger = logging.getLogger('siUnits')

        self.console_handler = logging.StreamHandler()
        self.console_handler.setFormatter(
            logging.Formatter('%(levelname)s - %(message)s'))
        self.logger.addHandler(self.console_handler)

        self.set_level(log_level)

    def set_level(self, level):
        """
        Set the logging level of the logger and its console handler.

        Args:
            level (str or int): 'silent', 'debug', 'info', 'warning', 'error',
                                'critical' or a logging level number.
                                Unknown names select 'debug'.
        """
        if isinstance(level, str):
            level = self._LEVELS.get(level.lower(), logging.DEBUG)

        self.logger.setLevel(level)
        self.console_handler.setLevel(level)

    def debug(self, msg):
        """Log lookup table and cache events."""
        self.logger.debug(msg)

    def error(self, msg):
        """Log a malformed metadata source before it is raised."""
        self.logger.error(msg)


logger = makeLager(log_level=DEFAULTS.log_level)
