"""
The MODEL layer contains the shape data structures and the factory.
It has NO knowledge of the command line; the only I/O it does is the
area report line written by the factory.
"""
