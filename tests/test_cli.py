import pytest

from morsewav.cli import DEF_FREQ, DEF_OUTFILE, DEF_SR, Params, UsageError, parse_args, usage
from morsewav.dsp import DspFilter


def test_defaults():
    p = parse_args(["HELLO"])
    assert p == Params(text="HELLO")
    assert p.outfile == DEF_OUTFILE
    assert p.freq == DEF_FREQ
    assert p.sample_rate == DEF_SR
    assert p.filter == DspFilter.NONE
    assert not p.raw


def test_outfile_dash_means_raw():
    p = parse_args(["-o", "-", "SOS"])
    assert p.raw
    assert p.outfile == "-"


def test_raw_shorthand():
    p = parse_args(["-R", "SOS"])
    assert p.raw
    assert p.outfile == "-"


def test_short_option_with_attached_value():
    p = parse_args(["-f600", "-w", "20", "SOS"])
    assert p.freq == 600.0
    assert p.wpm == 20.0


def test_options_after_text_are_permuted():
    p = parse_args(["SOS", "-q", "--outfile", "x.wav"])
    assert p.text == "SOS"
    assert p.quiet
    assert p.outfile == "x.wav"


def test_long_option_with_equals_and_prefix():
    p = parse_args(["--fre=900", "--filt=HANN3", "SOS"])
    assert p.freq == 900.0
    assert p.filter == DspFilter.HANN3


def test_ambiguous_prefix_rejected():
    with pytest.raises(UsageError):
        parse_args(["--f=900", "SOS"])


def test_numeric_prefix_parsing():
    p = parse_args(["-f", "12abc", "SOS"])
    assert p.freq == 12.0


def test_non_numeric_frequency_is_invalid():
    with pytest.raises(UsageError):
        parse_args(["-f", "abc", "SOS"])


def test_filter_none_case_insensitive():
    assert parse_args(["-F", "NoNe", "SOS"]).filter == DspFilter.NONE


def test_unknown_filter():
    with pytest.raises(UsageError, match="Unknown filter: bogus"):
        parse_args(["-F", "bogus", "SOS"])


def test_low_rate_forces_hann3():
    p = parse_args(["-r", "8000", "-F", "none", "SOS"])
    assert p.sample_rate == 8000
    assert p.filter == DspFilter.HANN3


def test_rate_below_minimum():
    with pytest.raises(UsageError):
        parse_args(["-r", "3999", "SOS"])


def test_farnsworth_clamped():
    assert parse_args(["-a", "0.5", "SOS"]).farns == 1.0
    assert parse_args(["--farns", "2.5", "SOS"]).farns == 2.5


@pytest.mark.parametrize("vol", ["0", "1.5", "-0.2"])
def test_volume_out_of_range(vol):
    with pytest.raises(UsageError):
        parse_args(["-v", vol, "SOS"])


def test_missing_text():
    with pytest.raises(UsageError):
        parse_args(["-q"])


def test_input_file_instead_of_text():
    p = parse_args(["-i", "in.txt"])
    assert p.infile == "in.txt"
    assert p.text is None


def test_version_without_text():
    assert parse_args(["-V"]).version
    assert parse_args(["--version"]).version


def test_help_is_usage_error():
    with pytest.raises(UsageError):
        parse_args(["-h", "SOS"])


def test_unknown_option():
    with pytest.raises(UsageError):
        parse_args(["-x", "SOS"])


def test_missing_argument():
    with pytest.raises(UsageError):
        parse_args(["SOS", "-o"])


def test_double_dash_ends_options():
    p = parse_args(["--", "-R"])
    assert p.text == "-R"
    assert not p.raw


def test_flags_cluster():
    p = parse_args(["-Pkq", "SOS"])
    assert p.play and p.keep and p.quiet


def test_usage_mentions_program_and_defaults():
    text = usage("prog")
    assert text.startswith('Usage: prog "TEXT" [options]')
    assert DEF_OUTFILE in text
    assert str(DEF_SR) in text