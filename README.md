# kmdiff

Python building blocks for differential k-mer analysis. It covers comparing
k-mer counts between a control cohort and a case cohort, keeping the
significant k-mers, and handling the files used for population-stratification
correction.

The package has no dependencies outside the standard library. It needs a
POSIX system because `kmdiff.utils` uses the `resource` module.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `kmdiff.kmer`
  - `Significance`: `CONTROL`, `CASE` or `NO`.
  - `significance_to_char`: maps a `Significance` to `-`, `+` or `$`, and any
    other value to `?`.
  - `KmerSign`: a dataclass holding a k-mer string, its p-value, its
    significance, the mean count in each cohort and an optional tuple of
    count ratios.
    - Two records are equal when their k-mers are equal. The hash is the
      k-mer's hash.
    - `<` is reversed on the p-value, so the larger p-value sorts first.
    - `dump(stream)` writes the record to a binary stream.
      `KmerSign.load(stream)` reads one record back. It returns `None` at the
      end of the stream and raises `IOError_` on a truncated record.
- `kmdiff.kff`: 2-bit packing of nucleotides (A=0, C=1, T=2, G=3).
  - `pack_nucleotides`, `encode_sequence` and `decode_sequence(data, kmer_size)`.
  - When the length is not a multiple of four, the first byte holds the
    leading remainder.
- `kmdiff.stats`
  - `Range(data, start, size)`: a read-only window over a sequence.
  - `mean`, `sum_count` (the sum and the number of positive values),
    `mean_count` and `sd` (population standard deviation).
  - `mean`, `mean_count` and `sd` raise `ValueError` on an empty sequence.
- `kmdiff.correction`: the `CorrectionType` enum (`NOTHING`, `BONFERRONI`,
  `BENJAMINI`, `SIDAK`, `HOLM`) and `correction_type_str`, which gives its
  name.
- `kmdiff.popstrat`
  - `write_gwas_eigenstrat_total`: writes per-sample totals, controls first
    and then cases.
  - `pca_to_pcs`: copies the rows of a PCA output file, skipping its
    eigenvalue header.
  - `load_phenotypes`: reads a tab-separated individual file; `Case` gives
    0.0 and anything else gives 1.0.
  - `load_pca_matrix`: reads a matrix of whitespace-separated values.
  - Unreadable or malformed files raise `IOError_`.
- `kmdiff.threadpool.ThreadPool(threads)`
  - The number of workers is capped at the CPU count.
  - `add_task(func)` queues a callable, which receives the worker index.
  - `join_all()` drains the queue and waits for every worker.
  - It can be used as a context manager.
- `kmdiff.blocking_queue.BlockingQueue(max_size, nb_producers)`: a bounded
  queue for several producers.
  - `push` blocks while the queue is full.
  - `pop` blocks while the queue is empty. It raises `QueueFinished` once every
    producer has called `end_signal(producer)` and nothing is left.
  - Iterating over the queue yields items until that point.
- `kmdiff.timer`
  - `Timer`: a monotonic timer with `start`, `end`, `reset`, `elapsed` and
    `formatted`.
  - `format_duration`: formats whole seconds, e.g. `01d02h03m04s`. Units that
    are zero are left out, except seconds.
- `kmdiff.utils`
  - `command_exists`, `get_binary_dir` and `get_uname_sr`.
  - `exec_external_cmd(cmd, args, sout, serr)` runs a program, optionally
    sending its stdout and stderr to files. It raises `ExternalExecFailed` if
    the program cannot be started or exits with a non-zero status.
  - `VerbosityLevel`, `str_to_verbosity_level` and `set_verbosity_level`
    control the level of the `kmdiff` logger.
  - `random_dna_seq`, `get_peak_rss` and `get_current_rss`.
- `kmdiff.signals`
  - `install_handlers(callback)` installs a handler for SIGABRT, SIGFPE,
    SIGILL, SIGINT, SIGSEGV and SIGTERM.
  - `default_callback` logs the signal. For every signal except SIGINT it
    also writes a backtrace to `./kmdiff_backtrace.log`. It then exits with
    the signal number.
  - `signal_to_string` names the handled signals.
- `kmdiff.exceptions`: every error the package raises derives from
  `KmdiffError`. `str()` gives `"<Name> - <message>"`.

## Example

```python
import io

from kmdiff.kmer import KmerSign, Significance
from kmdiff.stats import Range, mean_count

counts = [2, 2, 0, 10, 0, 1, 0, 0, 42, 2]
controls = Range(counts, 0, 5)
cases = Range(counts, 5, 5)
print(mean_count(controls), mean_count(cases))  # (2.8, 3) (9.0, 3)

record = KmerSign("ACGTACGTACGTACGTACGT", 0.01, Significance.CONTROL)
buffer = io.BytesIO()
record.dump(buffer)
buffer.seek(0)
assert KmerSign.load(buffer) == record
```

## What this package does not do

This is a library only. It does not provide:

- a command-line program;
- k-mer counting or reading of count matrices;
- statistical tests between cohorts;
- application of the multiple-testing corrections named in `CorrectionType`;
- merging of partitions;
- running of the PCA tool itself.

Those steps are left to the code that uses these building blocks.