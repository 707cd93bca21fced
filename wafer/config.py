# coding= utf-8
"""
The default configuration file: a plain script of word definitions that is
loaded at startup and by the `reload` word. It is created from
:data:`DEFAULT_SCRIPT` the first time it is needed.
"""
import logging
import os
import shlex
import subprocess
import sys
from pathlib import Path

logger = logging.getLogger(__name__)

CONF_ENV = 'WAFER_CONF'
CONF_NAME = '.wafer.conf'

DEFAULT_SCRIPT = """\
sqrt:   0.5 **
pi:     3.14159265358979323846
e:      2.7182818284590452354
sqrt2:  1.41421356237309504880

log:    ln swap ln /

over:   swap dup rot swap

2push:  swap push push
2pop:   pop pop swap

2swap:  rot push rot pop
2dup:   swap dup rot dup rot swap
2over:  2swap 2dup 2push 2swap 2pop
2drop:  drop drop
"""


def default_path():
    """ $WAFER_CONF if it is set, otherwise ~/.wafer.conf. """
    override = os.environ.get(CONF_ENV)
    if override:
        return Path(override)
    return Path.home() / CONF_NAME


def write_default(path):
    path = Path(path)
    path.write_text(DEFAULT_SCRIPT, encoding='utf-8')
    logger.info('wrote default script to %s', path)


def ensure_default(path):
    """ Creates the file from the seed script unless it already exists. """
    if not Path(path).exists():
        write_default(path)


def open_in_editor(path):
    """
    Opens the file in $VISUAL or $EDITOR, falling back to whatever the
    platform uses to open files. Raises OSError if that can't be started.
    """
    path = str(path)
    editor = os.environ.get('VISUAL') or os.environ.get('EDITOR')
    if editor:
        subprocess.run(shlex.split(editor) + [path])
    elif sys.platform == 'win32':
        os.startfile(path)
    elif sys.platform == 'darwin':
        subprocess.run(['open', path])
    else:
        subprocess.run(['xdg-open', path])
