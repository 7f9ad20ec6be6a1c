"""Exécuteurs de commandes Linux via subprocess.

Ce module fournit les deux modes d'exécution du noyau :

    - StreamingExecutor : relaie stdout/stderr de l'enfant vers les
      flux standard de l'appelant, sans valeur de retour.
    - CapturedExecutor : lit l'intégralité de stdout en mémoire
      (plafonné) et la retourne sans les blancs de début et de fin.

Les deux flux de l'enfant sont vidés en parallèle, chacun par son
propre thread : un enfant qui remplit le pipe stderr pendant que
stdout est encore ouvert ne peut pas bloquer l'exécution.

Example :
    Exécution streaming puis capture :

        from linux_shell_utils.commands import (
            CapturedExecutor,
            CommandSettings,
            StreamingExecutor,
        )

        settings = CommandSettings()
        StreamingExecutor().run(settings, ["ls", "-la"])
        user = CapturedExecutor().call(settings, ["whoami"])
"""

import io
import os
import signal
import subprocess  # nosec B404
import sys
import threading
from dataclasses import dataclass, field
from functools import partial
from typing import BinaryIO, Callable, List, Optional, Sequence

from linux_shell_utils.commands.formatter import (
    CommandFormatter,
    PlainCommandFormatter,
    runs_as_root,
)
from linux_shell_utils.commands.invoker import ProcessInvoker
from linux_shell_utils.commands.settings import CommandSettings
from linux_shell_utils.errors.exceptions import (
    NoStdoutError,
    OutputLimitExceededError,
    ProcessFailedError,
    UserNotFoundError,
)

TRIMMED_CHARS = " \t\n\r"
_CAPTURE_CHUNK_SIZE = io.DEFAULT_BUFFER_SIZE


def _start_thread(target: Callable, *args) -> threading.Thread:
    thread = threading.Thread(target=target, args=args, daemon=True)
    thread.start()
    return thread


def _binary_sink(stream) -> BinaryIO:
    """Retourne la couche binaire d'un flux texte standard.

    Le flux texte est vidé au préalable pour conserver l'ordre
    des écritures déjà faites par l'appelant.
    """
    stream.flush()
    return getattr(stream, "buffer", stream)


def _relay(
    pipe: BinaryIO,
    sink: BinaryIO,
    chunk_size: int,
    errors: List[Exception],
) -> None:
    """Relaie un pipe vers un flux jusqu'à la fin du flux.

    Après un échec d'écriture, le pipe continue d'être lu (et les
    données ignorées) pour que l'enfant ne bloque pas sur un pipe plein.
    """
    write_failed = False
    try:
        while True:
            chunk = pipe.read(chunk_size)
            if not chunk:
                break
            if write_failed:
                continue
            try:
                sink.write(chunk)
                sink.flush()
            except (OSError, ValueError) as e:
                errors.append(e)
                write_failed = True
    except (OSError, ValueError) as e:
        errors.append(e)


@dataclass
class _CapturedStream:
    """Contenu lu depuis un pipe en mode capture."""

    name: str
    data: bytearray = field(default_factory=bytearray)
    overflow: bool = False
    error: Optional[Exception] = None


def _capture(
    pipe: BinaryIO,
    stream: _CapturedStream,
    limit: int,
    on_overflow: Callable[[], None],
) -> None:
    """Lit un pipe en mémoire dans la limite de ``limit`` octets.

    Au dépassement, on_overflow est appelé une fois puis le pipe est
    lu jusqu'à la fin sans rien conserver de plus.
    """
    try:
        while True:
            chunk = pipe.read(_CAPTURE_CHUNK_SIZE)
            if not chunk:
                break
            if stream.overflow:
                continue
            if len(stream.data) + len(chunk) > limit:
                stream.overflow = True
                on_overflow()
                continue
            stream.data.extend(chunk)
    except (OSError, ValueError) as e:
        stream.error = e


def _kill_group(proc: subprocess.Popen) -> None:
    """Tue l'enfant et tout son groupe de processus.

    Un petit-enfant (ex: ``yes`` dans ``sh -c 'yes; :'``) hérite des
    pipes : tant qu'il vit, la lecture n'atteint pas la fin du flux.
    L'enfant doit avoir été lancé avec ``new_session=True``.
    """
    try:
        os.killpg(proc.pid, signal.SIGKILL)
    except ProcessLookupError:
        # Groupe déjà vide.
        proc.kill()


class _BaseExecutor:
    """Socle commun : invocateur et formateur."""

    def __init__(
        self,
        invoker: Optional[ProcessInvoker] = None,
        formatter: Optional[CommandFormatter] = None,
    ) -> None:
        self._formatter = formatter or PlainCommandFormatter()
        self._invoker = invoker or ProcessInvoker(self._formatter)

    def _fail(
        self,
        settings: CommandSettings,
        command: List[str],
        returncode: int,
        stderr: str = "",
    ) -> ProcessFailedError:
        """Logue l'échec d'une commande et construit l'exception."""
        settings.logger.log_error(
            self._formatter.format_failure(
                command, returncode, runs_as_root(command)
            )
        )
        return ProcessFailedError(command, returncode, stderr)


class StreamingExecutor(_BaseExecutor):
    """Exécute une commande en relayant sa sortie en temps réel.

    stdout et stderr de l'enfant sont recopiés octet pour octet, par
    blocs de ``settings.max_buffer_size``, vers les flux binaires de
    l'appelant (sys.stdout/sys.stderr par défaut).

    Attributes:
        _stdout: Flux binaire de destination de stdout, ou None.
        _stderr: Flux binaire de destination de stderr, ou None.
    """

    def __init__(
        self,
        invoker: Optional[ProcessInvoker] = None,
        formatter: Optional[CommandFormatter] = None,
        stdout: Optional[BinaryIO] = None,
        stderr: Optional[BinaryIO] = None,
    ) -> None:
        """Initialise l'exécuteur streaming.

        Args:
            invoker: Invocateur de processus (défaut: ProcessInvoker).
            formatter: Formateur des messages de diagnostic.
            stdout: Flux binaire recevant stdout. Si None, la couche
                binaire de sys.stdout est résolue à chaque appel.
            stderr: Flux binaire recevant stderr. Si None, la couche
                binaire de sys.stderr est résolue à chaque appel.
        """
        super().__init__(invoker, formatter)
        self._stdout = stdout
        self._stderr = stderr

    def run(
        self, settings: CommandSettings, command: Sequence[str]
    ) -> None:
        """Exécute la commande et relaie ses sorties.

        Args:
            settings: Paramètres d'exécution.
            command: Liste d'arguments, le premier étant le programme.

        Raises:
            CommandNotFoundError: Si la commande est vide.
            SpawnFailedError: Si le processus ne peut pas être lancé.
            NoStdoutError: Si le pipe stdout est indisponible.
            ProcessFailedError: Si le code retour est non nul ou si
                la lecture/le relais d'un flux échoue.
        """
        argv = list(command)
        out_sink = (
            self._stdout if self._stdout is not None
            else _binary_sink(sys.stdout)
        )
        err_sink = (
            self._stderr if self._stderr is not None
            else _binary_sink(sys.stderr)
        )
        errors: List[Exception] = []

        with self._invoker.spawn(settings, argv) as proc:
            if proc.stdout is None:
                raise NoStdoutError(argv)

            threads = [
                _start_thread(
                    _relay, proc.stdout, out_sink,
                    settings.max_buffer_size, errors,
                )
            ]
            if proc.stderr is not None:
                threads.append(
                    _start_thread(
                        _relay, proc.stderr, err_sink,
                        settings.max_buffer_size, errors,
                    )
                )
            for thread in threads:
                thread.join()
            returncode = proc.wait()

        if errors:
            settings.logger.log_error(
                f"Erreur de relais pour {' '.join(argv)} : {errors[0]}"
            )
            raise ProcessFailedError(
                argv,
                returncode,
                message=f"Erreur de lecture/écriture : {errors[0]}",
            ) from errors[0]

        if returncode != 0:
            raise self._fail(settings, argv, returncode)


class CapturedExecutor(_BaseExecutor):
    """Exécute une commande et retourne sa sortie standard nettoyée.

    stdout et stderr sont lus intégralement en mémoire, chacun
    plafonné à ``settings.max_buffer_size`` octets. Un dépassement
    tue le processus et ses descendants, puis lève
    OutputLimitExceededError : la sortie n'est jamais tronquée
    silencieusement.

    stderr n'est jamais retourné : s'il n'est pas vide, il est
    transmis au logger (avertissement en cas de succès, erreur
    en cas d'échec).
    """

    def call(
        self,
        settings: CommandSettings,
        command: Sequence[str],
        require_output: bool = True,
    ) -> str:
        """Exécute la commande et retourne stdout sans blancs autour.

        Args:
            settings: Paramètres d'exécution.
            command: Liste d'arguments, le premier étant le programme.
            require_output: Si True, une sortie vide après nettoyage
                lève UserNotFoundError. Si False, "" est retourné.

        Returns:
            stdout décodé, débarrassé des espaces, tabulations,
            retours chariot et sauts de ligne de début et de fin.

        Raises:
            CommandNotFoundError: Si la commande est vide.
            SpawnFailedError: Si le processus ne peut pas être lancé.
            NoStdoutError: Si le pipe stdout est indisponible.
            OutputLimitExceededError: Si un flux dépasse la limite.
            ProcessFailedError: Si le code retour est non nul ou si
                la lecture d'un flux échoue.
            UserNotFoundError: Si la sortie est vide et requise.
        """
        argv = list(command)
        limit = settings.max_buffer_size
        out = _CapturedStream("stdout")
        err = _CapturedStream("stderr")

        with self._invoker.spawn(
            settings, argv, new_session=True
        ) as proc:
            if proc.stdout is None:
                raise NoStdoutError(argv)

            kill = partial(_kill_group, proc)
            threads = [_start_thread(_capture, proc.stdout, out, limit, kill)]
            if proc.stderr is not None:
                threads.append(
                    _start_thread(_capture, proc.stderr, err, limit, kill)
                )
            for thread in threads:
                thread.join()
            returncode = proc.wait()

        stderr = bytes(err.data).decode(settings.encoding, errors="replace")

        for stream in (out, err):
            if stream.overflow:
                settings.logger.log_error(
                    f"{stream.name} dépasse {limit} octets, processus "
                    f"arrêté : {' '.join(argv)}"
                )
                raise OutputLimitExceededError(argv, stream.name, limit)
        for stream in (out, err):
            if stream.error is not None:
                settings.logger.log_error(
                    f"Erreur de lecture de {stream.name} : {stream.error}"
                )
                raise ProcessFailedError(
                    argv,
                    returncode,
                    stderr,
                    message=f"Erreur de lecture : {stream.error}",
                ) from stream.error

        if returncode != 0:
            if stderr:
                settings.logger.log_error(
                    self._formatter.format_stderr(
                        argv, stderr, runs_as_root(argv)
                    )
                )
            raise self._fail(settings, argv, returncode, stderr)

        if stderr:
            settings.logger.log_warning(
                self._formatter.format_stderr(
                    argv, stderr, runs_as_root(argv)
                )
            )

        result = bytes(out.data).decode(
            settings.encoding, errors="replace"
        ).strip(TRIMMED_CHARS)
        if not result and require_output:
            raise UserNotFoundError(argv)
        return result
