# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Walkthrough of genro_dotpath.

Run with::

    python examples/dotpath_demos/demos.py
"""

from __future__ import annotations

import json

from genro_dotpath import DotStore, flatten, unflatten


def _show(label: str, value) -> None:
    print(f"{label}:")
    print(json.dumps(value, indent=2, default=repr))


def flatten_demo() -> None:
    _show("flatten simple", flatten({'test': {'tester': {'testing': '10'}}}))
    _show("flatten dotted key", flatten({
        'test': {
            'tester.makeup': {'testing': '10', 'makeup': 10},
            'madeup': 20,
        },
        'fakeup': 30,
    }))


def unflatten_demo() -> None:
    _show("unflatten", unflatten({
        'test.tester.testing': '10',
        'test.tester.makeup': 10,
        'test.madeup': 20,
        'fakeup': 30,
    }))
    _show("unflatten escaped", unflatten({r'a\.b.c\.d.e': 42}))


def store_demo() -> None:
    store = DotStore()
    store.write('nest.secondnest.third.nest', 10)
    store.write(r'nest.secondnest.third\.nest', 20)
    store.write(r'nest.secondnest.third.nest\.value', 30)

    print('read("nest.secondnest.third.nest")', store.read('nest.secondnest.third.nest'))
    print(r'read("nest.secondnest.third\.nest")', store.read(r'nest.secondnest.third\.nest'))
    print('read("nest.fakekey")', store.read('nest.fakekey'))
    print('has_key("nest.secondnest")', store.has_key('nest.secondnest'))
    print('get_keys("nest.secondnest.third\\.nest")',
          store.get_keys(r'nest.secondnest.third\.nest'))
    _show("dump", store.dump())

    store.init({'example': {'like': {'path': 'test'}}})
    for match in store.has({'like': 'like', 'regex': r'example\..*\.path'}):
        print('match', match.path, match.value)


if __name__ == '__main__':
    flatten_demo()
    unflatten_demo()
    store_demo()
