from typing import Any, Callable, Iterable


def describe(values: Iterable[Any]) -> str:
    '''Formats the values as a set literal, using their `str` form.'''
    return _describe_with(values, str)


def debug_describe(values: Iterable[Any]) -> str:
    '''Formats the values as a set literal, using their `repr` form.'''
    return _describe_with(values, repr)


def _describe_with(values: Iterable[Any], transform: Callable[[Any], str]) -> str:
    description = ', '.join(transform(value) for value in values)
    return '{%s}' % description if description else '{}'
