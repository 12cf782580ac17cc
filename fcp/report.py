import json

import numpy as np
import pandas as pd

from fcp.utils.serializers import JsonEncoder


class CopyReport(object):
    """
    The outcome of one copy_tree run, available once every worker has
    been joined.

    Attributes
    ----------
    results : list
              of CopyResult, one per discovered file

    skipped : list
              of (path, OSError) for the directories the walk could not read

    nworkers : int
               The number of workers used

    batch_size : int
                 The drain granularity used

    elapsed : float
              Wall clock seconds for the walk and the copy
    """
    columns = ['source_path', 'destination_path', 'success', 'error']

    def __init__(self, results, skipped=None, nworkers=None, batch_size=None, elapsed=0.0):
        self.results = list(results)
        self.skipped = list(skipped or [])
        self.nworkers = nworkers
        self.batch_size = batch_size
        self.elapsed = elapsed

    def __repr__(self):
        return 'CopyReport(copied={}, failed={}, skipped={}, elapsed={:.3f})'.format(
            self.ncopied, self.nfailed, len(self.skipped), self.elapsed)

    def __len__(self):
        return len(self.results)

    @property
    def failures(self):
        return [r for r in self.results if not r.success]

    @property
    def ncopied(self):
        return sum(1 for r in self.results if r.success)

    @property
    def nfailed(self):
        return len(self.results) - self.ncopied

    @property
    def ok(self):
        """
        True if every discovered file was copied. Skipped directories do
        not count as failures.
        """
        return self.nfailed == 0

    def to_dataframe(self):
        """
        Returns
        -------
        df : pd.DataFrame
             with one row per copy attempt and the columns source_path,
             destination_path, success, error (None on success)
        """
        rows = [(r.task.source_path, r.task.destination_path, r.success,
                 None if r.success else str(r.error)) for r in self.results]
        return pd.DataFrame(rows, columns=self.columns)

    def to_csv(self, path):
        self.to_dataframe().to_csv(path, index=False, errors='surrogateescape')

    def summary(self):
        df = self.to_dataframe()
        return {'files': len(df),
                'copied': np.sum(df['success'].values),
                'failed': np.sum(~df['success'].values.astype(bool)),
                'skipped_directories': [p for p, _ in self.skipped],
                'workers': self.nworkers,
                'batch_size': self.batch_size,
                'elapsed': self.elapsed}

    def to_json(self, path):
        with open(path, 'w') as f:
            json.dump(self.summary(), f, cls=JsonEncoder, indent=2)
