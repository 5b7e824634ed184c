"""
Jerarquía de errores del sistema de backup
"""


class BackupAppError(Exception):
    """Error base de la aplicación"""


class ConfigurationError(BackupAppError):
    """Error genérico del almacén de configuración"""


class ConfigNotFoundError(ConfigurationError):
    """No existe el archivo de configuración"""


class ConfigDecodeError(ConfigurationError):
    """El archivo de configuración está mal formado"""


class ConfigWriteError(ConfigurationError):
    """No se pudo escribir el archivo de configuración"""


class CaptureError(BackupAppError):
    """Fallo del proceso externo que genera un artefacto"""


class DestinationError(BackupAppError):
    """Error base de los destinos de almacenamiento"""


class DestinationAuthError(DestinationError):
    """Credenciales rechazadas o ilegibles"""


class DestinationTransportError(DestinationError):
    """Fallo de red, de transferencia o rechazo del servicio"""


class DestinationNotFoundError(DestinationError):
    """Carpeta, bucket o canal de destino inexistente"""


class InvalidInputError(BackupAppError):
    """Respuesta inválida en el asistente interactivo"""


class SchedulerInstallError(BackupAppError):
    """No se pudo instalar la tarea periódica"""
