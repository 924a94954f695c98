# Return types of the runtime's builtin functions, used when a call does not
# resolve to a user-defined function or struct.
BUILTIN_RETURN_TYPES: dict[str, str] = {
    # Type conversion
    "str": "str",
    "int": "int",
    "float": "float",
    "bool": "bool",
    # Collections
    "len": "int",
    "append": "list",
    "pop": "any",
    # Strings
    "input": "str",
    "split": "list",
    "join": "str",
    "upper": "str",
    "lower": "str",
    "strip": "str",
    "replace": "str",
    "decode": "str",
    "encode": "bytes",
    # Math
    "sqrt": "float",
    "abs": "any",
    "round": "int",
    "floor": "int",
    "ceil": "int",
    "pow": "any",
    "min": "any",
    "max": "any",
    "sin": "float",
    "cos": "float",
    "tan": "float",
    "PI": "float",
    "E": "float",
    # File I/O
    "fopen": "int",
    "fread": "bytes",
    "fwrite": "int",
    "exists": "bool",
    "isfile": "bool",
    "isdir": "bool",
    "listdir": "list",
    "getsize": "int",
    "getcwd": "str",
    "abspath": "str",
    "basename": "str",
    "dirname": "str",
    "pathjoin": "str",
    # Processes
    "fork": "int",
    "wait": "int",
    "sleep": "void",
    # Sockets
    "socket": "int",
    "accept": "int",
    "send": "int",
    "recv": "bytes",
    # Python interop
    "py_call": "any",
    "py_getattr": "any",
    "py_call_method": "any",
}
