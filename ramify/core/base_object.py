from copy import deepcopy


class BaseObject(object):
    """
    Base class providing the `repr`/`copy` conventions shared by every object in the library.
    """

    def __reprdir__(self):
        return list(self.__dict__.keys())


    def __repr__(self) -> str:
        field_strs = []
        for k in self.__reprdir__():
            v = getattr(self, k)

            # `__raw__` prints the value without its name
            if k == '__raw__':
                field_strs.append(str(v))
            elif isinstance(v, BaseObject) and hasattr(v, 'shorthand'):
                field_strs.append(f'{k}={v.shorthand()}')
            else:
                field_strs.append(f'{k}={v!r}')

        return f'<{self.__class__.__name__}: {", ".join(field_strs)}>'


    def __str__(self) -> str:
        return self.__repr__()


    def copy(self) -> 'BaseObject':
        """
        Returns a deep copy of the object.

        Returns:
            BaseObject: Copy.
        """
        return deepcopy(self)
