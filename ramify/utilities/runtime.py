from tqdm import tqdm


class RuntimeConfiguration(object):
    """
    Global runtime configuration. Allows for display settings and caching behavior to be changed at runtime.
    """

    def __init__(self):
        self.poly_exp_separator    = '^'
        self.default_short_printer = lambda elem: elem.shorthand()
        self.enable_parent_cache   = True
        self.show_progress         = True


    def __repr__(self):
        return f'<RuntimeConfiguration: poly_exp_separator={self.poly_exp_separator!r}, enable_parent_cache={self.enable_parent_cache}, show_progress={self.show_progress}>'


    def __str__(self):
        return self.__repr__()


    def report_progress(self, iterable: object, visual: bool=False, **kwargs) -> object:
        """
        Wraps `iterable` in a progress bar if `visual` is set and progress reporting is enabled.

        Parameters:
            iterable (iterable): Iterable to wrap.
            visual       (bool): Whether or not the caller wants a progress bar.

        Returns:
            iterable: Possibly wrapped iterable.
        """
        if visual and self.show_progress:
            return tqdm(iterable, **kwargs)

        return iterable


RUNTIME = RuntimeConfiguration()
