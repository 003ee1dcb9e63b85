import pytest

from leetkit.scaffold import create_task, main, task_package_name


def test_task_package_name_zero_padded():
    assert task_package_name(13) == "t00013"
    assert task_package_name(99999) == "t99999"


def test_create_task_makes_directory_and_files(tmp_path):
    created = create_task(7, tmp_path)
    name = task_package_name(7)
    assert created == tmp_path / name
    assert created.is_dir()
    module = created / f"{name}.py"
    test_file = created / f"test_{name}.py"
    assert module.is_file()
    assert test_file.is_file()
    assert name in module.read_text(encoding="utf-8")
    assert name in test_file.read_text(encoding="utf-8")


@pytest.mark.parametrize("number", [0, -5, 100000])
def test_create_task_rejects_out_of_range(tmp_path, number):
    with pytest.raises(ValueError, match=r"range \[1;99999\]"):
        create_task(number, tmp_path)
    assert list(tmp_path.iterdir()) == []


def test_create_task_twice_fails(tmp_path):
    create_task(5, tmp_path)
    with pytest.raises(FileExistsError):
        create_task(5, tmp_path)


def test_main_without_arguments_prints_usage(capsys):
    assert main([]) == 1
    out = capsys.readouterr().out
    assert "Usage:" in out
    assert "error:" not in out


def test_main_with_non_number(capsys, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["abc"]) == 1
    out = capsys.readouterr().out
    assert "error:" in out
    assert list(tmp_path.iterdir()) == []


def test_main_out_of_range(capsys, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["0"]) == 1
    out = capsys.readouterr().out
    assert "expected task number to be in range [1;99999]" in out


def test_main_creates_task(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["42"]) == 0
    assert (tmp_path / task_package_name(42)).is_dir()


def test_main_existing_task_fails(capsys, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["42"]) == 0
    assert main(["42"]) == 1
    assert "unable to create task" in capsys.readouterr().out