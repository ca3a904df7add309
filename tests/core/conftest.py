import pathlib
import typing

import pytest

from surd.core import native


@pytest.fixture
def kernel_ini(
    tmp_path: pathlib.Path,
    monkeypatch: pytest.MonkeyPatch,
) -> typing.Callable[..., pathlib.Path]:
    """Install a temporary `surd.ini` with the given kernel settings.

    The file goes into a temporary directory that becomes the current working
    directory, which is the first place the kernel looks. The cached settings
    are discarded before and after each test that uses this fixture.
    """
    defaults = {
        'root_degree_type': 'uint64',
        'hash_type': 'int64',
        'check_canonical': 'no',
    }

    def install(**settings) -> pathlib.Path:
        lines = ['[kernel]']
        lines.extend(
            f"{key} = {value}"
            for key, value in {**defaults, **settings}.items()
        )
        path = tmp_path / 'surd.ini'
        path.write_text('\n'.join(lines) + '\n')
        monkeypatch.chdir(tmp_path)
        native.reset()
        return path

    yield install
    native.reset()
