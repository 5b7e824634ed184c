"""
Tests para el asistente de configuración, la instalación en cron y la CLI
"""
import shutil
import subprocess
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

sys.path.insert(0, str(Path(__file__).parent.parent))

from backup_app import cli
from backup_app.config import Config
from backup_app.exceptions import InvalidInputError, SchedulerInstallError
from backup_app.models import BackupConfiguration, Integration, StorageKind, UploadResult
from backup_app.repositories.config_repository import ConfigRepository
from backup_app.services.configuration_wizard import ConfigurationWizard, WizardStep
from backup_app.services.scheduler_service import SchedulerService

EXECUTABLE = "/usr/local/bin/backup-app"


def scripted_wizard(*answers):
    """Asistente que responde con una lista fija de respuestas"""
    feed = iter(answers)
    messages = []
    wizard = ConfigurationWizard(ask=lambda prompt: next(feed), say=messages.append)
    wizard.messages = messages
    return wizard


class TestWizardTransitions(unittest.TestCase):
    """Tests de cada transición por separado"""

    def setUp(self):
        """Setup para tests"""
        self.wizard = scripted_wizard()

    def test_integration_choices(self):
        """Test cada opción de integración lleva a su siguiente pregunta"""
        self.assertEqual(
            self.wizard.transition(WizardStep.INTEGRATIONS, "1"), WizardStep.POSTGRES_URL
        )
        self.assertEqual(self.wizard.draft.integrations, [Integration.POSTGRESQL])
        self.assertEqual(
            self.wizard.transition(WizardStep.INTEGRATIONS, "2"), WizardStep.FOLDER_PATH
        )
        self.assertEqual(self.wizard.draft.integrations, [Integration.FOLDER])

    def test_postgres_url_then_folder_when_both(self):
        """Test con ambas fuentes se pregunta también la carpeta"""
        self.wizard.transition(WizardStep.INTEGRATIONS, "3")
        self.assertEqual(
            self.wizard.transition(WizardStep.POSTGRES_URL, "postgres://x"),
            WizardStep.FOLDER_PATH
        )

    def test_invalid_integration_aborts(self):
        """Test opción de integración inválida"""
        with self.assertRaises(InvalidInputError):
            self.wizard.transition(WizardStep.INTEGRATIONS, "7")

    def test_preset_frequencies(self):
        """Test frecuencias predefinidas"""
        expected = {"1": "0 0 * * *", "2": "0 0 * * 0", "3": "0 0 1 * *"}
        for choice, cron in expected.items():
            self.assertEqual(self.wizard.transition(WizardStep.FREQUENCY, choice), WizardStep.STORAGE)
            self.assertEqual(self.wizard.draft.frequency, cron)

    def test_invalid_frequency_falls_back_to_daily(self):
        """Test opción '9' usa la frecuencia diaria sin abortar"""
        next_step = self.wizard.transition(WizardStep.FREQUENCY, "9")
        self.assertEqual(next_step, WizardStep.STORAGE)
        self.assertEqual(self.wizard.draft.frequency, Config.DAILY_SCHEDULE)
        self.assertEqual(len(self.wizard.messages), 1)

    def test_custom_frequency(self):
        """Test expresión cron personalizada"""
        self.assertEqual(
            self.wizard.transition(WizardStep.FREQUENCY, "4"), WizardStep.CUSTOM_FREQUENCY
        )
        self.wizard.transition(WizardStep.CUSTOM_FREQUENCY, "*/5 * * * *")
        self.assertEqual(self.wizard.draft.frequency, "*/5 * * * *")

    def test_storage_choices(self):
        """Test cada destino pide sus propios parámetros"""
        expected = {
            "1": (StorageKind.LOCAL, WizardStep.LOCAL_PATH),
            "2": (StorageKind.TELEGRAM, WizardStep.BOT_TOKEN),
            "3": (StorageKind.S3, WizardStep.S3_BUCKET),
            "4": (StorageKind.GOOGLE_DRIVE, WizardStep.GOOGLE_CREDS),
        }
        for choice, (kind, step) in expected.items():
            self.assertEqual(self.wizard.transition(WizardStep.STORAGE, choice), step)
            self.assertEqual(self.wizard.draft.storage, kind)

    def test_invalid_storage_aborts(self):
        """Test opción de almacenamiento inválida"""
        with self.assertRaises(InvalidInputError):
            self.wizard.transition(WizardStep.STORAGE, "5")

    def test_channel_id_must_be_integer(self):
        """Test ID de canal no numérico"""
        with self.assertRaises(InvalidInputError):
            self.wizard.transition(WizardStep.CHANNEL_ID, "my-channel")
        self.assertEqual(self.wizard.transition(WizardStep.CHANNEL_ID, "-1001"), WizardStep.DONE)
        self.assertEqual(self.wizard.draft.values["channel_id"], -1001)


class TestWizardRun(unittest.TestCase):
    """Tests del recorrido completo del asistente"""

    def test_both_sources_custom_schedule_local(self):
        """Test ambas fuentes, cron personalizado y destino local"""
        wizard = scripted_wizard(
            "3", "postgres://u:p@db:5432/app", "/data", "4", "*/5 * * * *", "1", "/backups"
        )
        config = wizard.run()

        self.assertEqual(config.integrations, [Integration.POSTGRESQL, Integration.FOLDER])
        self.assertEqual(config.frequency, "*/5 * * * *")
        self.assertEqual(config.storage, StorageKind.LOCAL)
        self.assertEqual(config.local_path, "/backups")
        self.assertEqual(config.bot_token, "")

    def test_s3_flow(self):
        """Test flujo completo hacia S3"""
        config = scripted_wizard(
            "2", "/srv/files", "2", "3", "bucket", "us-east-1", "AKIA", "secret"
        ).run()

        self.assertEqual(config.integrations, [Integration.FOLDER])
        self.assertEqual(config.frequency, "0 0 * * 0")
        self.assertEqual(config.postgres_url, "")
        self.assertEqual(
            (config.s3_bucket, config.s3_region, config.s3_access_key, config.s3_secret_key),
            ("bucket", "us-east-1", "AKIA", "secret")
        )

    def test_secrets_use_secret_prompt(self):
        """Test el token del bot se pide sin eco"""
        secrets = []

        def ask_secret(prompt):
            secrets.append(prompt)
            return "123:abc"

        feed = iter(["1", "postgres://x", "1", "2", "-100"])
        wizard = ConfigurationWizard(
            ask=lambda prompt: next(feed), say=lambda msg: None, ask_secret=ask_secret
        )
        config = wizard.run()

        self.assertEqual(len(secrets), 1)
        self.assertEqual(config.bot_token, "123:abc")
        self.assertEqual(config.channel_id, -100)


class TestSchedulerService(unittest.TestCase):
    """Tests para SchedulerService"""

    def setUp(self):
        """Setup para tests"""
        self.temp_dir = Path(tempfile.mkdtemp())

    def tearDown(self):
        """Cleanup después de tests"""
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_build_entry(self):
        """Test formato de la línea de crontab"""
        entry = SchedulerService().build_entry("0 0 * * *", EXECUTABLE)
        self.assertEqual(entry, f"0 0 * * * {EXECUTABLE} --backup")

    @mock.patch("backup_app.services.scheduler_service.subprocess.run")
    def test_install_replaces_crontab(self, run):
        """Test la línea se envía a 'crontab -'"""
        run.return_value = subprocess.CompletedProcess(['crontab', '-'], 0, stdout="", stderr="")

        entry = SchedulerService(executable=EXECUTABLE).install("0 0 1 * *")

        self.assertEqual(entry, f"0 0 1 * * {EXECUTABLE} --backup")
        args, kwargs = run.call_args
        self.assertEqual(args[0], ['crontab', '-'])
        self.assertEqual(kwargs["input"], entry + "\n")

    @mock.patch("backup_app.services.scheduler_service.subprocess.run")
    def test_install_failure(self, run):
        """Test crontab termina con error"""
        run.return_value = subprocess.CompletedProcess(
            ['crontab', '-'], 1, stdout="", stderr="bad minute"
        )
        with self.assertRaises(SchedulerInstallError):
            SchedulerService(executable=EXECUTABLE).install("99 * * * *")

    @mock.patch("backup_app.services.scheduler_service.subprocess.run")
    def test_install_without_crontab_binary(self, run):
        """Test crontab no instalado"""
        run.side_effect = FileNotFoundError("crontab")
        with self.assertRaises(SchedulerInstallError):
            SchedulerService(executable=EXECUTABLE).install("0 0 * * *")

    def test_resolve_python_script(self):
        """Test un script .py se invoca con el intérprete actual"""
        script = self.temp_dir / "main.py"
        script.write_text("")
        with mock.patch.object(sys, "argv", [str(script)]):
            executable = SchedulerService().resolve_executable()
        self.assertEqual(
            executable,
            f"{Path(sys.executable).absolute()} {script.resolve()}"
        )

    def test_resolve_console_script(self):
        """Test un ejecutable instalado se usa directamente"""
        script = self.temp_dir / "backup-app"
        script.write_text("")
        with mock.patch.object(sys, "argv", [str(script)]):
            executable = SchedulerService().resolve_executable()
        self.assertEqual(executable, str(script.resolve()))


class TestCli(unittest.TestCase):
    """Tests para los modos de la CLI"""

    def setUp(self):
        """Setup para tests"""
        self.temp_dir = Path(tempfile.mkdtemp())
        self.config_file = self.temp_dir / ".backup_app" / "config.json"
        self.repo = ConfigRepository(self.config_file)

    def tearDown(self):
        """Cleanup después de tests"""
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_parse_backup_flag(self):
        """Test la bandera --backup activa el modo ejecución"""
        self.assertTrue(cli.parse_arguments(["--backup"]).backup)
        self.assertFalse(cli.parse_arguments([]).backup)

    @mock.patch("backup_app.services.scheduler_service.subprocess.run")
    def test_configure_persists_and_installs(self, run):
        """Test asistente -> configuración guardada -> una línea en crontab"""
        run.return_value = subprocess.CompletedProcess(['crontab', '-'], 0, stdout="", stderr="")
        wizard = scripted_wizard(
            "3", "postgres://u:p@db:5432/app", "/data", "4", "*/5 * * * *", "1", "/backups"
        )

        code = cli.configure_backup(
            self.repo, wizard=wizard, scheduler=SchedulerService(executable=EXECUTABLE)
        )

        self.assertEqual(code, 0)
        saved = self.repo.load()
        self.assertEqual(saved.integrations, [Integration.POSTGRESQL, Integration.FOLDER])
        self.assertEqual(saved.frequency, "*/5 * * * *")
        self.assertEqual(saved.storage, StorageKind.LOCAL)
        self.assertEqual(saved.local_path, "/backups")

        crontab = run.call_args[1]["input"]
        self.assertEqual(crontab.splitlines(), [f"*/5 * * * * {EXECUTABLE} --backup"])

    def test_configure_invalid_input_has_no_side_effects(self):
        """Test abortar el asistente no guarda ni programa nada"""
        scheduler = mock.Mock()
        code = cli.configure_backup(self.repo, wizard=scripted_wizard("9"), scheduler=scheduler)

        self.assertEqual(code, 1)
        self.assertFalse(self.config_file.exists())
        scheduler.install.assert_not_called()

    def test_configure_keeps_config_when_cron_fails(self):
        """Test la configuración queda en disco aunque falle crontab"""
        scheduler = mock.Mock()
        scheduler.install.side_effect = SchedulerInstallError("no crontab")
        wizard = scripted_wizard("2", "/data", "1", "1", "/backups")

        code = cli.configure_backup(self.repo, wizard=wizard, scheduler=scheduler)

        self.assertEqual(code, 1)
        self.assertEqual(self.repo.load().folder_path, "/data")

    @mock.patch("backup_app.cli.BackupService")
    def test_backup_with_missing_config(self, service):
        """Test sin configuración no se captura ni se envía nada"""
        self.assertEqual(cli.perform_backup(self.repo), 1)
        service.assert_not_called()

    @mock.patch("backup_app.cli.BackupService")
    def test_backup_with_malformed_config(self, service):
        """Test configuración mal formada"""
        self.config_file.parent.mkdir(parents=True)
        self.config_file.write_text("[1, 2")
        self.assertEqual(cli.perform_backup(self.repo), 1)
        service.assert_not_called()

    @mock.patch("backup_app.cli.BackupService")
    def test_backup_exit_code_reflects_failed_uploads(self, service):
        """Test cualquier envío fallido devuelve código distinto de cero"""
        self.repo.save(BackupConfiguration(
            integrations=[Integration.FOLDER],
            frequency="0 0 * * *",
            storage=StorageKind.LOCAL,
            folder_path="/data",
            local_path="/backups"
        ))

        service.return_value.run.return_value = [UploadResult("a", "local", True, location="/b/a")]
        self.assertEqual(cli.perform_backup(self.repo), 0)

        service.return_value.run.return_value = [UploadResult("a", "local", False, error="x")]
        self.assertEqual(cli.perform_backup(self.repo), 1)


if __name__ == '__main__':
    unittest.main()
