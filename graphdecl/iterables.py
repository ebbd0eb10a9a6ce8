def partition(predicate, iterable):
    true_values = []
    false_values = []

    for element in iterable:
        if predicate(element):
            values = true_values
        else:
            values = false_values
        values.append(element)

    return true_values, false_values


def to_dict(iterable):
    result = {}

    for key, value in iterable:
        if key in result:
            raise KeyError("key is already in dict: {!r}".format(key))

        result[key] = value

    return result


def unique(iterable):
    seen = set()
    result = []

    for element in iterable:
        if element not in seen:
            seen.add(element)
            result.append(element)

    return result
