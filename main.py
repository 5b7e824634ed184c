#!/usr/bin/env python3
"""
Sistema de Backup Programado
Punto de entrada principal

Uso:
    python main.py              # Asistente de configuración
    python main.py --backup     # Ejecutar backup (invocado por cron)
    python main.py --help       # Ayuda
"""
import sys
from pathlib import Path

# Agregar la raíz del proyecto al path
sys.path.insert(0, str(Path(__file__).resolve().parent))

from backup_app.cli import main


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("\nPrograma interrumpido por el usuario")
        sys.exit(0)
    except Exception as e:
        print(f"Error crítico: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)
