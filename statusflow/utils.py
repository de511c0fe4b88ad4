from collections import OrderedDict

''' Flow utility tools '''

def map_append(d,k,v):
    """
    append v to d[k] as a list
    """
    if k not in d:
        d[k] = []
    d[k].append(v)

def unique(names):
    """
    Remove duplicates from an iterable of names, keeping the first occurrence.

    Args:
        names (iterable): The names, in encounter order.

    Returns:
        list: Each distinct name once, in order of first occurrence.
    """
    return list(OrderedDict.fromkeys(names))
