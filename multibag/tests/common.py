import os

import hjson

from multibag import Multiset, HashedMultiset

data_dir = os.path.join(os.path.dirname(__file__), os.pardir, os.pardir, "test_data")

with open(os.path.join(data_dir, "scenarios.hjson")) as stream:
    scenarios = hjson.load(stream)

multiset_types = (Multiset, HashedMultiset)


def replay(multiset, steps):
    '''
    Apply each step of a scenario to `multiset`, returning the list of
    `(step, returned value)` pairs for every step that declares an
    expected result.
    '''
    outcomes = []
    for step in steps:
        operation, element = step[0], step[1]
        if operation == "add":
            multiset.add(element, step[2])
        elif operation == "remove":
            outcomes.append((step, multiset.remove(element, step[2])))
        elif operation == "remove_all":
            outcomes.append((step, multiset.remove_all(element)))
        else:  # pragma: no cover
            raise ValueError("Unknown operation %r" % operation)
    return outcomes


def snapshot(multiset):
    return (multiset.elements, multiset.multiplicities, multiset.size)
