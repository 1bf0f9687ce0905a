"""Domain ports: contracts implemented by outer layers."""

from exportcheck.domain.ports.reporter import ReporterProtocol

__all__ = ["ReporterProtocol"]
