from score.assetgroups import FilesGroup


def test_put_keeps_order():
    group = FilesGroup('main')
    group.put('js', ['/js/b.js', '/js/a.js'])
    assert group.name == 'main'
    assert group.files['js'] == ('/js/b.js', '/js/a.js')
    assert group.get_files('css') == ()


def test_put_copies_file_list():
    files = ['/js/a.js']
    group = FilesGroup('main')
    group.put('js', files)
    files.append('/js/b.js')
    assert group.get_files('js') == ('/js/a.js',)


def test_minimized_file_is_overwritten():
    group = FilesGroup('main')
    assert group.get_minimized_file('js') is None
    group.put_minimized_file('js', '/wro/main-aaa.min.js')
    group.put_minimized_file('js', '/wro/main-bbb.min.js')
    assert group.minimized_files == {'js': '/wro/main-bbb.min.js'}


def test_hash_depends_on_files_and_order():
    first = FilesGroup('main')
    first.put('js', ['/js/a.js', '/js/b.js'])
    second = FilesGroup('other')
    second.put('js', ['/js/a.js', '/js/b.js'])
    third = FilesGroup('main')
    third.put('js', ['/js/b.js', '/js/a.js'])
    assert first.hash('js') == second.hash('js')
    assert first.hash('js') != third.hash('js')
    assert '-' not in first.hash('js')
