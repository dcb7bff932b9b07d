import os

from score.assetgroups.resources import FolderResourceSpace


def test_lists_files_and_folders(tmp_path):
    folder = tmp_path / 'wro'
    folder.mkdir()
    (folder / 'main-a1b2.min.js').write_text('')
    (folder / 'old').mkdir()
    resources = FolderResourceSpace(str(tmp_path))
    assert resources.list_paths('/wro/') == {
        '/wro/main-a1b2.min.js', '/wro/old/'}


def test_basepath_without_trailing_slash(tmp_path):
    folder = tmp_path / 'static' / 'wro'
    folder.mkdir(parents=True)
    (folder / 'main-a1b2.min.css').write_text('')
    resources = FolderResourceSpace(str(tmp_path))
    assert resources.list_paths('/static/wro') == {
        '/static/wro/main-a1b2.min.css'}


def test_missing_folder(tmp_path):
    resources = FolderResourceSpace(str(tmp_path))
    assert resources.list_paths('/wro/') is None


def test_empty_folder(tmp_path):
    os.mkdir(os.path.join(str(tmp_path), 'wro'))
    resources = FolderResourceSpace(str(tmp_path))
    assert resources.list_paths('/wro/') is None


def test_basepath_is_a_file(tmp_path):
    (tmp_path / 'wro').write_text('')
    resources = FolderResourceSpace(str(tmp_path))
    assert resources.list_paths('/wro/') is None
