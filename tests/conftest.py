import threading
import time

import pytest

from score.assetgroups import Context
from score.assetgroups.model import ConfiguredModelFactory
from score.assetgroups.resources import ResourceSpace


class CountingModelFactory(ConfiguredModelFactory):

    def __init__(self, declarations, delay=0, error=None):
        super().__init__(declarations)
        self.delay = delay
        self.error = error
        self.calls = 0
        self._lock = threading.Lock()

    def create(self):
        with self._lock:
            self.calls += 1
        if self.delay:
            time.sleep(self.delay)
        if self.error:
            raise self.error
        return super().create()


class ListedResourceSpace(ResourceSpace):

    def __init__(self, paths):
        self.paths = paths
        self.requested = []

    def list_paths(self, basepath):
        self.requested.append(basepath)
        return self.paths


DECLARATIONS = {
    'home': ['/js/jquery.js', '/css/reset.css', '/js/home.js',
             '/css/home.css'],
    'reports': ['/css/reports.css', '/js/charts.js'],
}


@pytest.fixture
def make_context():
    def make_context(declarations=DECLARATIONS, paths=None, **kwargs):
        return Context(CountingModelFactory(declarations, **kwargs),
                       ListedResourceSpace(paths))
    return make_context
