# mandelpar

mandelpar renders the Mandelbrot set over a square region of the complex
plane and saves the result as a binary PPM (`P6`) image.

Each point is given the iteration at which `z -> z**2 + c` first leaves
radius 2. A point that never escapes is given the iteration limit instead.
The image is coloured by histogram. Each escape count is placed in the
middle of its own slice of a sine/cosine spectrum, and the width of that
slice depends on how many pixels share the count. Points that never escape
are drawn black.

The work can run in one process. It can also be split into horizontal bands
of rows, with each band computed by its own worker process. All the workers
write into a single grid of escape counts held in shared memory.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Commands

### `pmandel`: parallel renderer

```
pmandel <tlr> <tli> <side-length> <max-iterations> <pixels> <image-file> <nprocs>
```

| Argument | Meaning |
| --- | --- |
| `tlr`, `tli` | Real and imaginary parts of the top-left corner |
| `side-length` | Length of one side of the square region; must be greater than zero |
| `max-iterations` | Escape iteration limit; at least 2 |
| `pixels` | Pixels per side of the image; at least 10 |
| `image-file` | Path of the PPM file to write |
| `nprocs` | Number of worker processes; at least 1, and no more than `pixels` |

How it works:

1. The image is divided into `nprocs` bands, each `pixels // nprocs` rows high.
2. Every band is computed by a worker, started as `python -m mandelpar.worker`.
3. If the rows do not divide evenly, the parent process computes the leftover rows at the bottom.
4. Once all workers have finished, the parent colours the grid and writes the image.

Example:

```
pmandel -2.0 1.5 3.0 500 600 mandel.ppm 4
```

If you give the wrong number of arguments, or an argument is not a number,
the command prints the expected format and exits with status 1. It also
exits with status 1 after printing a message in these cases:

- a value is out of range
- a worker fails
- the image cannot be written

### `mandel`: serial renderer

```
mandel RealCoord ImagCoord SideLength EscapeIterations PixelsPerSide ImageFile
```

This computes the same kind of image in a single process. `PixelsPerSide`
must be at least 48, `SideLength` must be greater than zero, and
`EscapeIterations` must be at least 2. Before computing, the command prints
the region and the pixel size it is about to render.

### `mandelc`: band worker

```
mandelc ShmName RealLeft ImagLeft RealWidth ImagHeight EscapeIterations WidthPixels HeightPixels Index
```

This is the worker that `pmandel` starts for each band. It does the
following:

1. Attaches to the shared grid named `ShmName`, which is `WidthPixels` square.
2. Computes rows `Index * HeightPixels` up to `(Index + 1) * HeightPixels`.
3. Stores those rows in the grid.

You do not normally need to run it yourself.

## Library use

```python
from mandelpar.mandelbrot import compute_image
from mandelpar.coloring import write_ppm

counts = compute_image(complex(-2.0, 1.5), 3.0, 200, 100)
with open("small.ppm", "wb") as stream:
    write_ppm(stream, counts, 100)
```

- `mandelpar.mandelbrot`
  - `escape_iterations(c, max_iterations)` returns the escape count of one point.
  - `compute_band(...)` returns the escape counts for a run of rows.
  - `compute_image(...)` returns the escape counts for a whole square region.
- `mandelpar.coloring`
  - `iteration_histogram` and `spectrum_positions` build the colour spectrum.
  - `pixel_color` returns the colour of a single point.
  - `spectrum_to_rgb` returns packed RGB bytes for a grid.
  - `ppm_header` returns the `P6` header.
  - `write_ppm(stream, point_counts, max_iterations)` writes a complete image and returns the number of bytes written.
- `mandelpar.grid.SharedGrid` is a two-dimensional grid of integers in named shared memory.
  - `SharedGrid.create(width, height)` makes a new zero-filled grid.
  - `SharedGrid.attach(name, width, height)` opens a grid made elsewhere.
  - Index `grid[row, col]` for one cell, or `grid[row]` for a whole row.
  - `rows()` copies out the whole grid.
  - Used as a context manager, the grid closes on exit, and it is removed on exit if this process created it.
- `mandelpar.pmandel`
  - `parse_args(argv)` returns a `RenderOptions`.
  - `band_layout(pixels, workers)` returns each band's first row and row count.
  - `render(options)` runs the parallel renderer and returns the escape counts.
- `mandelpar.single.render_serial(start, side, max_iterations, pixels, path)` renders in one process.
- `mandelpar.worker.run_worker(...)` computes one band into a shared grid.

## Limitations

- Output is binary PPM only. The package does not write other image formats and does not display images.
- Only square regions are rendered. The same pixel spacing is used on both axes.