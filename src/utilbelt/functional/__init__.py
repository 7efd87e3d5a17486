"""Functional helpers for utilbelt.

One module per host type (strings, lists, iterables, maps, numbers,
datetimes, durations, colors, enums). Every function takes the value it
operates on as its first argument and is stateless; only the functions whose
name says so (``remove_*``, ``swap``, ``move``, ``get_or_put``, ``shift``,
``remove_exact``, ``clear_and_add_all``) mutate their argument.
"""
