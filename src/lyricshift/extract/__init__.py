from lyricshift.extract.lrc import LrcLine, LrcTracks, extract_lrc_tracks, render_lrc

__all__ = ["LrcLine", "LrcTracks", "extract_lrc_tracks", "render_lrc"]
