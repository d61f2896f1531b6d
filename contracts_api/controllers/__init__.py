"""
Controllers wrapping store queries with the API's access and balance rules
"""
from .admin_controller import AdminController
from .balance_controller import BalanceController
from .contract_controller import ContractController
from .job_controller import JobController

__all__ = [
    'AdminController',
    'BalanceController',
    'ContractController',
    'JobController',
]
