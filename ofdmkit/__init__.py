"""Building blocks for an audio-band OFDM modem: PRNGs, Huffman trees, buffers, WAVE headers and plot output."""

__version__ = "0.1.0"

__all__ = ["buffers", "huffman", "plotting", "prng", "riff"]