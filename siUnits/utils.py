import yaml
from siUnits.logger import logger
from siUnits.errors import ConfigurationError


def yaml_loader(yaml_path):
    """
    Load and parse a YAML unit metadata file.

    Args:
        yaml_path (str): Path to the YAML file

    Returns:
        dict: Parsed YAML content

    Raises:
        ConfigurationError: If the file is missing or is not valid YAML
    """
    try:
        with open(yaml_path, 'r', encoding='utf-8') as file:
            return yaml.safe_load(file)
    except yaml.YAMLError as e:
        msg = f"Error parsing YAML file '{yaml_path}': {e}"
    except FileNotFoundError:
        msg = f"Could not find file: {yaml_path}"

    logger.error(msg)
    raise ConfigurationError(msg)


class CleanDumper(yaml.SafeDumper):
    """Custom YAML dumper that creates cleaner output"""

    def represent_tuple(self, data):
        # Convert tuples to lists for cleaner output
        return self.represent_list(list(data))


# Register the custom representers
CleanDumper.add_representer(tuple, CleanDumper.represent_tuple)


def yaml_writer(yaml_path, config):
    """
    Write a configuration dictionary to a YAML file with clean formatting.

    Args:
        yaml_path (str): Path to the YAML file.
        config (dict): Configuration dictionary.
    """
    with open(yaml_path, 'w', encoding='utf-8') as file:
        yaml.dump(config, file, Dumper=CleanDumper, sort_keys=False,
                  allow_unicode=True, default_flow_style=False)
