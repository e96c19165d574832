"""Manipulate 4-bit unsigned integers.

This module implements a 4-bit unsigned integer type backed by
an explicit sequence of bits. Addition and subtraction are computed
bit by bit with ripple-carry and ripple-borrow chains, and every
operation wraps around modulo 16.

"""
