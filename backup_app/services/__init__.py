"""
Servicios de la aplicación
"""
from .backup_service import BackupService
from .cleanup_service import CleanupService
from .configuration_wizard import ConfigurationWizard, WizardStep
from .scheduler_service import SchedulerService

__all__ = [
    'BackupService',
    'CleanupService',
    'ConfigurationWizard',
    'SchedulerService',
    'WizardStep'
]
