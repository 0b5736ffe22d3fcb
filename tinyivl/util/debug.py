# Diagnostic printing for range maps.

import sys
import traceback

def dump(rmap, probe=(), out=None):
    '''Print the boundary table of rmap, then the value looked up for each key in probe.'''
    if out is None:
        out = sys.stdout
    out.write("Map values\n")
    rmap.print(out)
    probe = list(probe)
    if probe:
        out.write("---------------------------\n")
        for key in probe:
            out.write("{0} : {1}\n".format(key, rmap[key]))

def print_exc(src):
    print(src)
    traceback.print_exc()
    traceback.print_stack()
