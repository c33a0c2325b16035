"""Application common ports."""

from apps.market.application.common.ports.transaction_manager import TransactionManager

__all__ = ["TransactionManager"]
