# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import logging
import os

from jsonschema import Draft4Validator as Validator
from pytest import fixture, skip

from lcsdiff.profiling import timer


pjoin = os.path.join

schema_dir = os.path.abspath(pjoin(os.path.dirname(__file__), ".."))


@fixture
def slow(request):
    if request.config.getoption('--quick', default=False):
        skip('skipping slow test')


@fixture(autouse=True)
def isolated_config(tmpdir, monkeypatch):
    """Keep user config files out of the tests.

    Runs each test in an empty working directory with an empty
    user config directory.
    """
    config_dir = tmpdir.mkdir('config')
    workdir = tmpdir.mkdir('work')
    monkeypatch.setenv('LCSDIFF_CONFIG_DIR', str(config_dir))
    monkeypatch.chdir(str(workdir))
    return str(config_dir)


@fixture
def reset_log():
    # clear root logger handlers before test and reset afterwards
    handlers = list(logging.getLogger().handlers)
    logging.getLogger().handlers[:] = []
    root_level = logging.getLogger().level
    level = logging.getLogger('lcsdiff').level
    yield
    logging.getLogger().handlers[:] = handlers
    logging.getLogger().setLevel(root_level)
    logging.getLogger('lcsdiff').setLevel(level)


@fixture
def reset_timer():
    timer.reset()
    yield timer
    timer.reset()


@fixture(scope='session')
def json_schema_diff(request):
    schema_path = os.path.join(schema_dir, 'diff_format.schema.json')
    with io.open(schema_path, encoding="utf8") as f:
        schema_json = json.load(f)
    return schema_json


@fixture
def diff_validator(request, json_schema_diff):
    return Validator(json_schema_diff)
