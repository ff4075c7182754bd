"""Project core.

Stable building blocks shared by the pipeline and the shell: the error
hierarchy and the tagged result types.
"""
