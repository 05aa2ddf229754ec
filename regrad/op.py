from enum import Enum


class Op(Enum):
    LEAF = ''
    ADD = '+'
    MUL = '*'
    NEG = 'neg'
    SUB = '-'
    RELU = 'relu'
