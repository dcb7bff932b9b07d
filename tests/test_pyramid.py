from pyramid.config import Configurator
from pyramid.request import Request
from pyramid.response import Response

from score.assetgroups.pyramid import init


def make_app(view):
    config = Configurator()
    conf = init({'group.home': ['/js/home.js', '/css/home.css']}, config)
    config.add_route('home', '/')
    config.add_view(view, route_name='home')
    return conf, config.make_wsgi_app()


def test_groups_are_loaded_on_first_request():
    conf, app = make_app(lambda request: Response('ok'))
    registry = conf.create_instance(None)
    assert registry.context is conf.context
    assert not registry.initialized
    response = Request.blank('/').get_response(app)
    assert response.status_code == 200
    assert registry.initialized


def test_request_property():
    def view(request):
        group = request.assetgroups.get_group('home')
        return Response(' '.join(group.get_files('js')))
    conf, app = make_app(view)
    response = Request.blank('/').get_response(app)
    assert response.text == '/js/home.js'


def test_unknown_group_responds_404():
    def view(request):
        return Response(' '.join(conf.urls('nonexistent', 'js')))
    conf, app = make_app(view)
    response = Request.blank('/').get_response(app)
    assert response.status_code == 404
