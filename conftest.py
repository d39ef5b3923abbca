""" Present so that pytest puts the project root on sys.path, making the `example` folder importable from tests. """
