import logging
import os
import shutil
import subprocess
import sys

from eafitsh.colors import RED, paint

log = logging.getLogger(__name__)


class LaunchError(Exception):
    """The target program could not be started"""


class ProcessLauncher:
    """
    OS-process capability used by the shell: pipes, spawning and waiting.
    Each child only gets the descriptors it is handed (close_fds), so a
    pipe end never leaks into the wrong process.
    """

    def create_pipe(self):
        return os.pipe()

    def spawn(self, args, stdin=None, stdout=None):
        """
        Start args[0] with args as its argv.
        Returns: Popen handle; raises LaunchError if it cannot start
        """
        if shutil.which(args[0]) is None:
            raise LaunchError(f"command '{args[0]}' not found")
        sys.stdout.flush()
        try:
            proc = subprocess.Popen(args, stdin=stdin, stdout=stdout, close_fds=True)
        except PermissionError:
            raise LaunchError(f"permission denied: {args[0]}")
        except FileNotFoundError:
            raise LaunchError(f"command not found: {args[0]}")
        except OSError as e:
            raise LaunchError(f"failed to execute '{args[0]}': {e}")
        log.debug("spawned pid=%d argv=%r", proc.pid, args)
        return proc

    def wait(self, proc):
        status = proc.wait()
        log.debug("pid=%d exited status=%d", proc.pid, status)
        return status

    def close(self, fd):
        os.close(fd)


def report_launch_error(err):
    print(paint("Error ejecutando comando", RED))
    print(f"eafitsh: {err}")


def run_cmd(args, launcher=None):
    """
    Run one program in the foreground.
    Its exit status is not inspected; a failure to start is reported here.
    """
    launcher = launcher or ProcessLauncher()
    try:
        proc = launcher.spawn(args)
    except LaunchError as e:
        log.debug("launch failed: %s", e)
        report_launch_error(e)
        return
    launcher.wait(proc)


def run_pipe(left, right, launcher=None):
    """
    Run `left | right`: left writes into the pipe, right reads from it.
    Both pipe ends are closed in the parent before waiting, otherwise
    right never sees end-of-input.
    """
    launcher = launcher or ProcessLauncher()
    try:
        r, w = launcher.create_pipe()
    except OSError as e:
        log.debug("pipe creation failed: %s", e)
        print(paint(f"Error creando el pipe: {e}", RED))
        return

    procs = []
    try:
        for args, stdin, stdout in ((left, None, w), (right, r, None)):
            try:
                procs.append(launcher.spawn(args, stdin=stdin, stdout=stdout))
            except LaunchError as e:
                log.debug("pipe side failed to launch: %s", e)
                report_launch_error(e)
    finally:
        launcher.close(r)
        launcher.close(w)

    for proc in procs:
        launcher.wait(proc)
