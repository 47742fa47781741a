# ofdmkit

Building blocks for an OFDM modem that sends data through an audio channel.
The package holds the pieces that a transmitter and a receiver share.

## Modules

- `ofdmkit.prng`: deterministic generators that give the same sequences as
  the C library generators. The transmitter and the receiver can therefore
  scramble and descramble in step.
  - `GlibcRandom(seed)`: the additive feedback generator behind `rand()`.
    `seed(seed)` resets it and `rand()` returns the next value in
    `[0, 2**31)`.
  - `Drand48(seed)`: the 48-bit linear congruential generator. `seed(seed)`
    resets it as `srand48` does. `lrand48()` returns an integer in
    `[0, 2**31)` and `drand48()` returns a float in `[0.0, 1.0)`.
- `ofdmkit.huffman`: binary trees that map a bit stream onto constellation
  point indices. The trees are kept as balanced as the number of points
  allows.
  - `HuffmanTree(length)` and `generate_huffman_tree(length)` build a tree
    with one leaf per point. A length below 1 raises `ValueError`.
  - `HuffmanTree.leaf(index)` returns a point's leaf and raises `IndexError`
    when the index is out of range.
  - `HuffmanTree.walk(bits)` follows bits from the root to a leaf. It reads
    only as many bits as it needs, and raises `ValueError` if the bits run
    out before a leaf is reached.
  - `HuffmanNode` has `constellation_index`, `depth`, `edge_value`, `parent`,
    `children` and `is_leaf`. `bits()` gives the path from the root to the
    node.
- `ofdmkit.buffers`: fixed-length rings of samples.
  - `CircularBuffer(length, sample_rate, dtype)`: `push(value)` overwrites
    the oldest sample and counts pushes in `n`. Iterating yields the samples
    from oldest to newest.
  - `OverlapSaveBuffer(length)`: a ring of real samples that starts filled
    with zeros.
- `ofdmkit.riff`: `RiffHeader` is the 44-byte little-endian RIFF/WAVE
  header. `pack()` returns the 44 bytes and raises `ValueError` when a field
  is out of range. `RiffHeader.unpack(data)` parses a header and raises
  `ValueError` if fewer than 44 bytes are given. `RiffType.PCM` is the PCM
  format code.
- `ofdmkit.plotting`: `plot_point_per_subchannel(stream, value, k,
  normalization_factor, channels, plot_index)` writes one line, `x plot_index
  y`. It places subchannel `k` in its cell of a roughly square grid, and the
  line is meant for an external plotter.

## Example

```python
import io
from ofdmkit.prng import GlibcRandom, Drand48
from ofdmkit.huffman import generate_huffman_tree
from ofdmkit.buffers import CircularBuffer
from ofdmkit.riff import RiffHeader
from ofdmkit.plotting import plot_point_per_subchannel

print(GlibcRandom(1).rand())            # 1804289383

# The sender and the receiver draw the same scrambling sequence.
sender, receiver = Drand48(42), Drand48(42)
assert [sender.lrand48() for _ in range(8)] == [receiver.lrand48() for _ in range(8)]

tree = generate_huffman_tree(3)
print(tree.leaf(2).bits())              # (0,)
print(tree.leaf(0).bits())              # (1, 0)
print(tree.walk([1, 1]).constellation_index)  # 1

ring = CircularBuffer(4)
for sample in range(1, 6):
    ring.push(sample)
print(list(ring))                       # [2.0, 3.0, 4.0, 5.0]

header = RiffHeader(sample_rate=44100, bits_per_sample=16)
assert RiffHeader.unpack(header.pack()) == header

out = io.StringIO()
plot_point_per_subchannel(out, 0.5 + 0.25j, 5, 2.0, 9, 1)
print(out.getvalue(), end="")           # 2.250000 1 1.125000
```

## What it does not do

The package does not build constellations of IQ points, such as ASK, PSK,
QAM or star patterns. It does not pick the nearest point to a received
sample. It does not turn bytes into symbols or symbols back into bytes. It
has no modem state, no transmitter or receiver, and no FFT processing. It
installs no command. To get a working modem, you have to combine its parts
with code of your own.

## Installing

```
pip install .
```

## Running the tests

```
pip install .[test]
pytest
```