"""Abjad numerology engine and the Flask API around it.

The engine modules (`normalize`, `abjad`, `reducers`, `classification`,
`compatibility`, `destiny`) don't import Flask; the app is built in
`abjad_api.factory`.
"""
