"""
Logging and QA module

Records warnings about frame arguments and assembled fragments, and provides log output for automated testing
"""
import logging
from typing import List, Dict, Any, Optional
from dataclasses import dataclass, field


@dataclass
class FragmentWarning:
    """Warning raised while checking a fragment"""
    element_id: Optional[int]
    warning_type: str  # 'non_finite_offset', 'duplicate_id', 'malformed_fragment'
    message: str
    details: Dict[str, Any] = field(default_factory=dict)


class FragmentLogger:
    """Logger for fragment emission checks"""

    def __init__(self, warn_non_finite: bool = True):
        """
        Args:
            warn_non_finite: Whether to warn about inf/nan offsets
        """
        self.warn_non_finite = warn_non_finite
        self.warnings: List[FragmentWarning] = []
        self.logger = logging.getLogger('tableframe')

        # Logger configuration (default)
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)
            self.logger.setLevel(logging.INFO)

    def _record(self, warning: FragmentWarning):
        self.warnings.append(warning)
        self.logger.warning(f"[{warning.element_id}] {warning.message}")

    def warn_non_finite_offset(self, element_id: Optional[int], axis: str, value: float):
        """Record warning for an inf/nan offset"""
        if not self.warn_non_finite:
            return

        self._record(FragmentWarning(
            element_id=element_id,
            warning_type='non_finite_offset',
            message=f"Non-finite offset: {axis}={value}",
            details={'axis': axis, 'value': value}
        ))

    def warn_duplicate_id(self, element_id: Optional[int]):
        """Record warning for a shape id already used on the slide"""
        self._record(FragmentWarning(
            element_id=element_id,
            warning_type='duplicate_id',
            message=f"Duplicate shape id: {element_id}",
        ))

    def warn_malformed_fragment(self, element_id: Optional[int], error: str, line: Optional[int] = None):
        """Record warning for a fragment that does not parse"""
        message = f"Malformed fragment: {error}"
        self._record(FragmentWarning(
            element_id=element_id,
            warning_type='malformed_fragment',
            message=message,
            details={'error': error, 'line': line}
        ))

    def info(self, message: str):
        """Info log"""
        self.logger.info(message)

    def error(self, message: str):
        """Error log"""
        self.logger.error(message)

    def get_warnings(self) -> List[FragmentWarning]:
        """Get warning list"""
        return self.warnings

    def clear_warnings(self):
        """Clear warning list"""
        self.warnings.clear()


# Global logger instance
_default_logger = FragmentLogger()


def get_logger() -> FragmentLogger:
    """Get default logger"""
    return _default_logger
