from tabulate import tabulate
from siUnits.errors import NotFound
from siUnits.registry import default_registry


def abbreviation_table(cultures=('en-US',), unit_types=None, registry=None,
                       tablefmt='psql'):
    """
    Format the default abbreviations of units side by side per culture.

    Args:
        cultures (list): Cultures to show, one column each.
        unit_types (list, optional): Unit types to show. Defaults to every
            unit type known to any of the cultures.
        registry (Registry, optional): Registry to read from. Defaults to the
            process-wide registry.
        tablefmt (str): tabulate table format.

    Returns:
        str: The formatted table.
    """
    if registry is None:
        registry = default_registry

    systems = [registry.get_or_create(culture) for culture in cultures]

    if unit_types is None:
        unit_types = []
        for system in systems:
            unit_types += [t for t in system.unit_types if t not in unit_types]

    rows = []
    for unit_type in unit_types:
        for unit in unit_type:
            row = {'Unit Type': unit_type.__name__, 'Unit': unit.name}
            for system in systems:
                try:
                    abbreviation = system.get_default_abbreviation(unit)
                except NotFound:
                    abbreviation = '-'
                row[str(system.culture)] = abbreviation
            rows.append(row)

    return tabulate(rows, headers='keys', tablefmt=tablefmt)


def print_abbreviation_tables(cultures=('en-US',), unit_types=None,
                              registry=None):
    """Print the default abbreviations of units per culture."""
    print(abbreviation_table(cultures, unit_types, registry))
