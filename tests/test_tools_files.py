"""Tests pour FileCommands."""

import io
from unittest.mock import MagicMock

import pytest

from linux_shell_utils.commands import (
    CapturedExecutor,
    CommandSettings,
    StreamingExecutor,
)
from linux_shell_utils.errors import (
    InvalidArgError,
    InvalidPathError,
    ProcessFailedError,
)
from linux_shell_utils.logging.base import Logger
from linux_shell_utils.tools import FileCommands


@pytest.fixture
def settings():
    return CommandSettings(logger=MagicMock(spec=Logger))


@pytest.fixture
def streaming():
    return MagicMock(spec=StreamingExecutor)


@pytest.fixture
def captured():
    return MagicMock(spec=CapturedExecutor)


@pytest.fixture
def files(streaming, captured):
    return FileCommands(streaming, captured)


@pytest.fixture
def source(tmp_path):
    path = tmp_path / "source.txt"
    path.write_text("contenu\n", encoding="utf-8")
    return str(path)


class TestCopieDeplacement:
    """Tests pour cp et mv."""

    def test_cp_sans_option(self, files, streaming, settings, source):
        files.cp(settings, source, "/tmp/dest")
        streaming.run.assert_called_once_with(
            settings, ["cp", source, "/tmp/dest"]
        )

    def test_cp_options_separees(self, files, streaming, settings, source):
        """Chaque option activée est un argument distinct."""
        files.cp(
            settings, source, "/tmp/dest",
            recursive=True, preserve=True, verbose=True,
        )
        streaming.run.assert_called_once_with(
            settings, ["cp", "-r", "-p", "-v", source, "/tmp/dest"]
        )

    def test_cp_source_inexistante(self, files, streaming, settings):
        with pytest.raises(InvalidPathError):
            files.cp(settings, "/chemin/absent/xyz", "/tmp/dest")
        streaming.run.assert_not_called()

    def test_cp_destination_vide(self, files, streaming, settings, source):
        with pytest.raises(InvalidPathError, match="Chemin vide"):
            files.cp(settings, source, "")
        streaming.run.assert_not_called()

    def test_mv_force(self, files, streaming, settings, source):
        files.mv(settings, source, "/tmp/dest", force=True)
        streaming.run.assert_called_once_with(
            settings, ["mv", "-f", source, "/tmp/dest"]
        )

    def test_mv_source_vide(self, files, settings):
        with pytest.raises(InvalidPathError):
            files.mv(settings, "", "/tmp/dest")


class TestCreationSuppression:
    """Tests pour mkdir, touch, rm."""

    def test_mkdir(self, files, streaming, settings):
        files.mkdir(settings, "a/b/c", parents=True)
        streaming.run.assert_called_once_with(
            settings, ["mkdir", "-p", "a/b/c"]
        )

    def test_mkdir_nom_vide(self, files, settings):
        with pytest.raises(InvalidArgError, match="name"):
            files.mkdir(settings, "")

    def test_touch(self, files, streaming, settings):
        files.touch(settings, "f.txt")
        streaming.run.assert_called_once_with(settings, ["touch", "f.txt"])

    def test_rm_options(self, files, streaming, settings):
        files.rm(settings, "build", recursive=True, force=True)
        streaming.run.assert_called_once_with(
            settings, ["rm", "-r", "-f", "build"]
        )

    def test_rm_chemin_vide(self, files, streaming, settings):
        with pytest.raises(InvalidArgError, match="path"):
            files.rm(settings, "", recursive=True, force=True)
        streaming.run.assert_not_called()


class TestLecture:
    """Tests pour cat, read, echo, pwd."""

    def test_cat(self, files, streaming, settings, source):
        files.cat(settings, source)
        streaming.run.assert_called_once_with(settings, ["cat", source])

    def test_cat_inexistant(self, files, settings):
        with pytest.raises(InvalidPathError):
            files.cat(settings, "/chemin/absent/xyz")

    def test_read_accepte_fichier_vide(
        self, files, captured, settings, source
    ):
        captured.call.return_value = ""
        assert files.read(settings, source) == ""
        captured.call.assert_called_once_with(
            settings, ["cat", source], require_output=False
        )

    def test_echo(self, files, streaming, settings):
        files.echo(settings, "bonjour monde")
        streaming.run.assert_called_once_with(
            settings, ["echo", "bonjour monde"]
        )

    def test_pwd(self, files, captured, settings):
        captured.call.return_value = "/home/user"
        assert files.pwd(settings) == "/home/user"
        captured.call.assert_called_once_with(settings, ["pwd"])


class TestFind:
    """Tests pour find."""

    def test_commande_complete(self, files, captured, settings, tmp_path):
        captured.call.return_value = ""
        files.find(settings, str(tmp_path), name="*.py", type="f", maxdepth=2)
        captured.call.assert_called_once_with(
            settings,
            [
                "find", str(tmp_path), "-maxdepth", "2",
                "-type", "f", "-name", "*.py",
            ],
            require_output=False,
        )

    def test_aucun_resultat(self, files, captured, settings, tmp_path):
        captured.call.return_value = ""
        assert files.find(settings, str(tmp_path), name="*.rs") == []

    def test_type_invalide(self, files, settings, tmp_path):
        with pytest.raises(InvalidArgError, match="type"):
            files.find(settings, str(tmp_path), type="l")

    def test_profondeur_negative(self, files, settings, tmp_path):
        with pytest.raises(InvalidArgError, match="maxdepth"):
            files.find(settings, str(tmp_path), maxdepth=-1)

    def test_racine_inexistante(self, files, settings):
        with pytest.raises(InvalidPathError):
            files.find(settings, "/chemin/absent/xyz")

    def test_reel(self, settings, tmp_path):
        """find réel : le motif n'est pas interprété par un shell."""
        (tmp_path / "a.txt").write_text("a", encoding="utf-8")
        (tmp_path / "b.log").write_text("b", encoding="utf-8")
        (tmp_path / "sub").mkdir()
        (tmp_path / "sub" / "c.txt").write_text("c", encoding="utf-8")

        found = FileCommands().find(
            settings, str(tmp_path), name="*.txt", type="f"
        )
        assert sorted(found) == [
            str(tmp_path / "a.txt"),
            str(tmp_path / "sub" / "c.txt"),
        ]

    def test_reel_profondeur(self, settings, tmp_path):
        (tmp_path / "sub").mkdir()
        (tmp_path / "sub" / "c.txt").write_text("c", encoding="utf-8")
        found = FileCommands().find(
            settings, str(tmp_path), name="*.txt", maxdepth=1
        )
        assert found == []


class TestGrep:
    """Tests pour grep."""

    def test_commande(self, files, captured, settings, source):
        captured.call.return_value = "ligne 1\nligne 2"
        assert files.grep(settings, "-v", source) == ["ligne 1", "ligne 2"]
        captured.call.assert_called_once_with(
            settings, ["grep", "-e", "-v", "--", source],
            require_output=False,
        )

    def test_code_1_liste_vide(self, files, captured, settings, source):
        captured.call.side_effect = ProcessFailedError(["grep"], 1)
        assert files.grep(settings, "absent", source) == []

    def test_code_2_propage(self, files, captured, settings, source):
        captured.call.side_effect = ProcessFailedError(["grep"], 2)
        with pytest.raises(ProcessFailedError):
            files.grep(settings, "[", source)

    def test_motif_vide(self, files, settings, source):
        with pytest.raises(InvalidArgError, match="pattern"):
            files.grep(settings, "", source)

    def test_reel(self, settings, tmp_path):
        path = tmp_path / "data.txt"
        path.write_text("alpha\nbeta\nalphabet\n", encoding="utf-8")
        files = FileCommands()
        assert files.grep(settings, "^alpha", str(path)) == [
            "alpha", "alphabet",
        ]
        assert files.grep(settings, "gamma", str(path)) == []


class TestReel:
    """Opérations réelles sur un répertoire temporaire."""

    def test_mkdir_touch_cp_read(self, settings, tmp_path):
        files = FileCommands(StreamingExecutor(stdout=io.BytesIO()))
        nested = tmp_path / "a" / "b"
        files.mkdir(settings, str(nested), parents=True)
        files.touch(settings, str(nested / "f.txt"))
        assert (nested / "f.txt").exists()

        src = tmp_path / "src.txt"
        src.write_text("  bonjour  \n", encoding="utf-8")
        files.cp(settings, str(src), str(nested / "copie.txt"))
        assert files.read(settings, str(nested / "copie.txt")) == "bonjour"

    def test_cat_relaye(self, settings, source):
        stdout = io.BytesIO()
        FileCommands(StreamingExecutor(stdout=stdout)).cat(settings, source)
        assert stdout.getvalue() == b"contenu\n"

    def test_rm_recursif(self, settings, tmp_path):
        target = tmp_path / "dir"
        target.mkdir()
        (target / "f").write_text("x", encoding="utf-8")
        FileCommands().rm(settings, str(target), recursive=True)
        assert not target.exists()
