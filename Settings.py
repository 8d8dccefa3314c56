import configparser
import os

from DensestErrors import InvalidArgument

module_dir = os.path.abspath(os.path.dirname(__file__))
default_properties_path = os.path.join(module_dir, 'densest.properties')

DEFAULTS = {
    'densest.tolerance': '1e-9',
    'densest.cut_check_tolerance': '1e-6',
    'densest.solver': 'boykov_kolmogorov',
    'densest.max_iterations': '0',
    'densest.max_subsets': '0',
    'densest.candidate_warning': '25',
    'densest.progress': 'false',
}


class Settings:
    '''
    Tunables shared by the solvers.

    tolerance            slack added to 2m when testing a cut for feasibility
    cut_check_tolerance  relative disagreement allowed between a reported cut
                         value and the capacity recomputed from its partition
    solver               name of the min-cut solver, see MinCut.SOLVERS
    max_iterations       binary search budget, 0 for none
    max_subsets          brute force enumeration budget, 0 for none
    candidate_warning    warn when more candidates than this survive pruning
    progress             show a tqdm bar while enumerating subsets
    '''

    def __init__(self, tolerance=1e-9, cut_check_tolerance=1e-6, solver='boykov_kolmogorov',
                 max_iterations=0, max_subsets=0, candidate_warning=25, progress=False) -> None:
        if tolerance < 0 or cut_check_tolerance < 0:
            raise InvalidArgument('tolerances must be non-negative')
        if max_iterations < 0 or max_subsets < 0 or candidate_warning < 0:
            raise InvalidArgument('budgets must be non-negative, use 0 to disable them')
        self.tolerance = tolerance
        self.cut_check_tolerance = cut_check_tolerance
        self.solver = solver
        self.max_iterations = max_iterations
        self.max_subsets = max_subsets
        self.candidate_warning = candidate_warning
        self.progress = progress

    def __repr__(self):
        fields = ', '.join(f'{k}={v!r}' for k, v in vars(self).items())
        return f'Settings({fields})'


def load_settings(path=None) -> Settings:
    ''' Reads the [DEFAULT] section of a .properties file; missing files and keys fall back to defaults.'''
    config = configparser.ConfigParser(defaults=DEFAULTS)
    config.read(path or default_properties_path)
    section = config['DEFAULT']
    try:
        return Settings(
            tolerance=section.getfloat('densest.tolerance'),
            cut_check_tolerance=section.getfloat('densest.cut_check_tolerance'),
            solver=section.get('densest.solver').strip(),
            max_iterations=section.getint('densest.max_iterations'),
            max_subsets=section.getint('densest.max_subsets'),
            candidate_warning=section.getint('densest.candidate_warning'),
            progress=section.getboolean('densest.progress'),
        )
    except ValueError as e:
        raise InvalidArgument(f'bad value in {path or default_properties_path}: {e}') from e
