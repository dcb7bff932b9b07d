from click.testing import CliRunner

from score.assetgroups import init
from score.assetgroups.cli import main


class FakeConf:

    def __init__(self, module):
        self.module = module

    def load(self, name):
        assert name == 'assetgroups'
        return self.module


def invoke(tmp_path, *args):
    (tmp_path / 'wro').mkdir(exist_ok=True)
    (tmp_path / 'wro' / 'home-0b29.min.js').write_text('')
    conf = init({
        'rootdir': str(tmp_path),
        'group.home': ['/js/jquery.js', '/js/home.js', '/css/home.css'],
        'group.admin': ['/css/admin.css'],
    })
    conf.create_instance(conf.context)
    return CliRunner().invoke(main, args, obj={'conf': FakeConf(conf)})


def test_groups(tmp_path):
    result = invoke(tmp_path, 'groups')
    assert result.exit_code == 0
    assert result.output.split() == ['admin', 'home']


def test_files(tmp_path):
    result = invoke(tmp_path, 'files', 'home', 'js')
    assert result.exit_code == 0
    assert result.output.splitlines() == [
        'js /js/jquery.js', 'js /js/home.js']


def test_files_of_all_types(tmp_path):
    result = invoke(tmp_path, 'files', 'home')
    assert result.output.splitlines() == [
        'css /css/home.css', 'js /js/jquery.js', 'js /js/home.js']


def test_files_of_unknown_group(tmp_path):
    result = invoke(tmp_path, 'files', 'nonexistent')
    assert result.exit_code != 0
    assert 'Unknown group: nonexistent' in result.output


def test_minimized(tmp_path):
    result = invoke(tmp_path, 'minimized')
    assert result.exit_code == 0
    assert result.output.splitlines() == ['home/js /wro/home-0b29.min.js']


def test_artifact_name(tmp_path):
    result = invoke(tmp_path, 'artifact-name', 'home', 'js')
    assert result.exit_code == 0
    name = result.output.strip()
    assert name.startswith('home-')
    assert name.endswith('.min.js')
