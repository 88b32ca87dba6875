"""
Release Signing Task Collection
"""

from invoke import Collection

namespace = Collection()

from .build.tasks import config_show, signing

# config_show is flattened, signing is nested
for task in Collection.from_module(config_show).tasks.values():
    namespace.add_task(task)

namespace.add_collection(Collection.from_module(signing), name='signing')
