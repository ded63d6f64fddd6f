import os

def GetInputPath(filepath : str|None) -> str|None:
    """
    Normalize the input file path for cross-platform compatibility.

    '-' is passed through unchanged, it refers to standard input.
    """
    if not filepath:
        return None
    if filepath == '-':
        return filepath
    return os.path.normpath(filepath)

def GetOutputPath(inputpath : str|None, outputpath : str|None = None) -> str|None:
    """
    Resolve the output path. Subtitles are written back to the input file unless another path is given.
    """
    if outputpath:
        return outputpath if outputpath == '-' else os.path.normpath(outputpath)
    return GetInputPath(inputpath)
