# coding: utf-8
"""
Launch the hexdump command.
"""
import sys

from hexdump.bin.hexdump import main

main(sys.argv[1:])
