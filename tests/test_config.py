"""Tests pour le chargement de configuration et ExecutableConfig."""

import json
import sys
import unittest
from pathlib import Path
from tempfile import TemporaryDirectory

from pydantic import BaseModel, ValidationError

from linux_exec_utils.commands import (
    DefaultExecutable,
    NonBlockingExecutable,
)
from linux_exec_utils.config import (
    ExecutableConfig,
    ExecutableConfigLoader,
    FileConfigLoader,
)
from linux_exec_utils.errors import ConfigurationError


class SampleConfig(BaseModel):
    """Modèle Pydantic de test."""
    name: str
    count: int

    model_config = {"extra": "forbid"}


class ConfigFileTestCase(unittest.TestCase):
    """Base fournissant un répertoire temporaire."""

    def setUp(self):
        self._tmp = TemporaryDirectory()
        self.tmp_path = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def _write(self, name: str, content: str) -> Path:
        path = self.tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path


class TestFileConfigLoader(ConfigFileTestCase):
    """Tests pour FileConfigLoader."""

    def setUp(self):
        super().setUp()
        self.loader = FileConfigLoader()

    def test_load_toml(self):
        """Un fichier TOML est chargé en dict."""
        path = self._write("app.toml", 'name = "test"\ncount = 2\n')
        self.assertEqual(
            self.loader.load(path), {"name": "test", "count": 2}
        )

    def test_load_json(self):
        """Un fichier JSON est chargé en dict."""
        path = self._write("app.json", json.dumps({"name": "x"}))
        self.assertEqual(self.loader.load(str(path)), {"name": "x"})

    def test_load_with_schema(self):
        """Avec schema, une instance du modèle est retournée."""
        path = self._write("app.json", json.dumps(
            {"name": "test", "count": 42}
        ))
        result = self.loader.load(path, schema=SampleConfig)
        self.assertIsInstance(result, SampleConfig)
        self.assertEqual(result.count, 42)

    def test_load_with_invalid_data_raises(self):
        """Des données invalides lèvent ConfigurationError."""
        path = self._write("app.json", json.dumps(
            {"name": "test", "count": "pas_un_int"}
        ))
        with self.assertRaises(ConfigurationError) as ctx:
            self.loader.load(path, schema=SampleConfig)
        self.assertIsInstance(ctx.exception.__cause__, ValidationError)

    def test_toml_mal_forme(self):
        """Un TOML mal formé lève ConfigurationError."""
        path = self._write("app.toml", "name = \n")
        with self.assertRaises(ConfigurationError) as ctx:
            self.loader.load(path)
        self.assertIn("app.toml", str(ctx.exception))

    def test_json_mal_forme(self):
        """Un JSON mal formé lève ConfigurationError."""
        path = self._write("app.json", "{\"name\": ")
        with self.assertRaises(ConfigurationError) as ctx:
            self.loader.load(path)
        self.assertIsInstance(
            ctx.exception.__cause__, json.JSONDecodeError
        )

    def test_racine_non_table(self):
        """Un JSON dont la racine n'est pas un objet est refusé."""
        path = self._write("app.json", json.dumps(["/bin/ls"]))
        with self.assertRaises(ConfigurationError):
            self.loader.load(path)

    def test_extension_en_majuscules(self):
        """L'extension est reconnue sans tenir compte de la casse."""
        path = self._write("APP.JSON", json.dumps({"name": "x"}))
        self.assertEqual(self.loader.load(path), {"name": "x"})

    def test_schema_non_pydantic(self):
        """Un schema qui n'est pas un BaseModel lève TypeError."""
        path = self._write("app.json", "{}")
        with self.assertRaises(TypeError):
            self.loader.load(path, schema=dict)

    def test_fichier_absent(self):
        """Un fichier absent lève FileNotFoundError."""
        with self.assertRaises(FileNotFoundError):
            self.loader.load(self.tmp_path / "absent.toml")

    def test_extension_non_supportee(self):
        """Une extension inconnue lève ValueError."""
        path = self._write("app.yaml", "name: x\n")
        with self.assertRaises(ValueError):
            self.loader.load(path)


class TestExecutableConfig(unittest.TestCase):
    """Tests pour le modèle ExecutableConfig."""

    def test_valeurs_par_defaut(self):
        """Codes vides, exécution synchrone, priorité basse."""
        config = ExecutableConfig(command=["/bin/ls"])
        self.assertEqual(config.valid_exit_codes, [])
        self.assertFalse(config.non_blocking)
        self.assertTrue(config.low_priority)

    def test_codes_dedoublonnes(self):
        """Les doublons sont retirés, l'ordre conservé."""
        config = ExecutableConfig(
            command=["/bin/ls"], valid_exit_codes=[2, 0, 2, 0]
        )
        self.assertEqual(config.valid_exit_codes, [2, 0])

    def test_commande_vide_refusee(self):
        """Une commande vide est invalide."""
        with self.assertRaises(ValidationError):
            ExecutableConfig(command=[])

    def test_programme_blanc_refuse(self):
        """Un programme blanc est invalide."""
        with self.assertRaises(ValidationError):
            ExecutableConfig(command=["  ", "-l"])

    def test_champ_inconnu_refuse(self):
        """Les champs inconnus sont refusés."""
        with self.assertRaises(ValidationError):
            ExecutableConfig(command=["/bin/ls"], timeout=5)

    def test_build_synchrone(self):
        """build() retourne un DefaultExecutable configuré."""
        config = ExecutableConfig(
            command=["/bin/ls", "-l"], valid_exit_codes=[0, 2]
        )
        executable = config.build()
        self.assertIsInstance(executable, DefaultExecutable)
        self.assertEqual(executable.get_command_line(), ["/bin/ls", "-l"])
        self.assertEqual(executable.get_valid_exit_codes(), [0, 2])

    def test_build_commande_independante(self):
        """L'exécutable construit ne partage pas la liste du modèle."""
        config = ExecutableConfig(command=["/bin/ls"])
        executable = config.build()
        executable.add_argument("-a")
        self.assertEqual(config.command, ["/bin/ls"])

    def test_build_non_bloquant(self):
        """build() enveloppe l'exécutable si non_blocking."""
        config = ExecutableConfig(
            command=[sys.executable, "-c", "pass"],
            valid_exit_codes=[0],
            non_blocking=True,
            low_priority=False,
        )
        executable = config.build()
        self.assertIsInstance(executable, NonBlockingExecutable)
        self.assertEqual(executable.get_valid_exit_codes(), [0])

        executable.exec()
        self.assertEqual(executable.wait(10), 0)


class TestExecutableConfigLoader(ConfigFileTestCase):
    """Tests pour ExecutableConfigLoader."""

    def test_load_toml(self):
        """La section [executable] est chargée."""
        path = self._write("backup.toml", (
            "[executable]\n"
            'command = ["/usr/bin/rsync", "-av", "/src/", "/dest/"]\n'
            "valid_exit_codes = [0, 24]\n"
        ))
        config = ExecutableConfigLoader(path).load()
        self.assertEqual(config.command[0], "/usr/bin/rsync")
        self.assertEqual(config.valid_exit_codes, [0, 24])

    def test_load_section_personnalisee(self):
        """Une autre section peut être demandée."""
        path = self._write("tools.json", json.dumps({
            "build": {"command": ["/usr/bin/make"], "non_blocking": True},
        }))
        config = ExecutableConfigLoader(path).load("build")
        self.assertTrue(config.non_blocking)

    def test_section_absente(self):
        """Une section absente lève KeyError avec les sections connues."""
        path = self._write("tools.json", json.dumps({"other": {}}))
        with self.assertRaises(KeyError) as ctx:
            ExecutableConfigLoader(path).load()
        self.assertIn("other", str(ctx.exception))

    def test_section_invalide(self):
        """Une section invalide lève ConfigurationError."""
        path = self._write("tools.json", json.dumps({
            "executable": {"command": []},
        }))
        with self.assertRaises(ConfigurationError) as ctx:
            ExecutableConfigLoader(path).load()
        self.assertIsInstance(ctx.exception.__cause__, ValidationError)

    def test_fichier_illisible(self):
        """Un fichier mal formé est refusé dès la construction."""
        path = self._write("backup.toml", "[executable\n")
        with self.assertRaises(ConfigurationError):
            ExecutableConfigLoader(path)


if __name__ == "__main__":
    unittest.main()
