"""Example sequence pair for trying out the dot plot.

Two related genomic fragments, compared with ``k = 8``.

Examples
--------
>>> from maze.compare import SequenceComparison
>>> reference, query, k = load_example()
>>> result = SequenceComparison(reference, k).compare(query)
"""

from __future__ import annotations

from maze.sequence import Sequence

EXAMPLE_K = 8

EXAMPLE_REFERENCE = (
    'CAGCACTTTGGGAGGCTAAGGCGGGTGGATCACCTGAGGTCAGGAGTTCAAGACCAACCTTACCAACATG'
    'GTGAGACTCTGTCTCTACTAAAAATACAAAAAATGAGCCGGGCGTGGTGGCGCATGTCTGTAGTCTCAGC'
    'TACTCAGGAGGCTGAGACAGGAGAATCAGTTGAACCCGGGAGGCAGAGGTTGCAGCGAGCCAAGATTGCA'
    'CCACTGCACTCCAGCCTGGGTGACAGAGCAAGACTCTGTCCCCCCCCAAAAAAAAGGGGGAGAGAGAGAG'
    'AAAGAGAGGAGATTCCCAGACACACTACCCTTTTAAATGGTAAATGGAAAATATTAAAACTATTATTGAT'
    'TTGACTCATTCGAGGCTTAACCTGTCATAAATGTATCTTCTTAATTTCTCTCCTTCAAAACTGCTTCAGA'
    'ACTTTGTATGAAGCGAGAAAGTAATTACAAATATCTTAGATTTTTCTTATTGCATGGTGACAGAATAATC'
    'AATCAAAATCTGCAAAATGGAGACATTTTTCAATCTTTAAGGAAGATGTTAAAAACTAAACAAACACAGA'
    'AGAACTATGTCCAACTCTTTAAAATGAACAATGAATTCTAATTACCTCTTCTTGAAACACAATTATGGCT'
    'TCCTGGAATTGTTTTTCACTTTCCCCTGTGGCGCTCAAAAGCTTTGTGTTTTCATAGAGAGTTTCATTCA'
    'CAATGCGATCAGACTGAAAATTGAAAAGTATTTTACATTATTCACGCCACAAGGTAGTATTTCAATTTTT'
    'CAAACTTCTTCAAAATTTTCAAACATCTGTGCACACACCTTAGATTTGAAAACAGCTCCTAGGATACCTG'
    'TCGCCACCTGCAGGAGCAGGATCAGAAGCAAGCCTATGAAAAACTGAAGAAGAGAAAAAGAAATATACAT'
    'TATCCTCAGTGCATTCAGTAACATCTGGGGACATTCTGGCACAGCACTTCTCTCTACAGCTGGGATTATA'
    'TCACAGTGAGAGTGTCAGTCACACTCTTCATTTATTCCACTTTTTACTTCAAGCTGAAAATTTTGGGTTC'
    'ATTACTACTCAGAAAATTGCTCCAGAGACTGATCGAGGAAAGTGGTTCAGGCAAAAAAATTATCAAAACA'
    'ACCATTGATATCTGTATGATATTGACTAGAGGGAAGTTTGAAAACTTAGATGAGTTTATTTGAGTATTAT'
    'TTTACTCCTTCCCTTTCTTCATCAAACACAACCTCACACAAACTCAGAATTGGCTTTGAAACAGCATCTC'
    'CACTACATTCAGAATCACCTGGCATCTTGTTACATATATAGATTCCTGAAATCGGCTTCAGATATGCTGA'
    'ATCATAAGTTTGAAGGATGCAGCCCAAAGACAATTAGCTTTTTTTTTAAACAAGCTCCTTGAGTAATTAA'
    'ATTCTTCAATTGCAAATGAGGCCTTATTGTTCAAAAAGCAATCAGTAGGAATGTTATTAGAGTCCCTTTA'
    'AAACTCTGTCTCTACCGTCCCTCACAATAAACAAACAGTTTTGAACATTTTTCTCAGGTACTGATATAAT'
    'CCTTACTTTATTAGAGGAATAAGTTTAGATTAGACCTGATAAACTTTTATGTCATATTTGTATCTGATAA'
    'ACACTTGATTTTTTTCTAATATTTTTACTATATCCATTTTCTACTGTATATGTTAAAAGTGAATGCCTGT'
    'GAATTATCCAAACCCAATTTATCCTCCTCAATGCTCTCTAAGAGATAATTCTGATTATCTCATTCATTTA'
    'AACTTTTTTTTTAGCATGGCATGTAGAACACCTATGATTTTACCACAACCCACACTTGGATTCATCTTCC'
    'ATCATTTACTGGAAACAGTTTTGCCGGTCTCCTGCCATACCCAAGGCTTCTCAGTTCCCAAACACACCAG'
    'CACTGTACTGCCACGTTGTCTTTCCGGAAAGCTTTTCCTACCCTCACTCATACAAATACCTTATTCACTT'
    'CTGCCCTGGTTTGAAAATCCCATCCCCTGTCTTGCCCTTTGCTTCTGGGGCCACTCCCACTGTAGCTATT'
    'TGCTTACTTATTAACCTTCCCTAGTAGGTTCTAAAGGTCTTATGTATTATTTCGCACAATATCTGACACA'
    'TAGAGGTATGGCAGTAATGTTGAATGAGTGAATGAATGAATGGATGAATGATTAAAATTTGTCTCCTCTC'
    'AGAGTATCCTCCAGTTTCTAAGCCAAACTAAGCCAAATCTAAGCCATATCAGCTTCCACAATCAAACCTT'
    'CTAAAGAGAAGTTGGAGTTAGAGTTTCATCAATCATGGCACGTTCTTTTAACAGACAATAGGGATGGGAG'
    'AGAATCCTCTGGAGTCTGAAGGTTGGACACTGGGATTTGTTTGGAGAACTCACCAACAGAAGCATGCAGC'
    'GACTTTCTTTTATAGCACCGCAGCATCCCAGGAAGCCCAGAATCATGATGATGGCACCTACAGCAATCAA'
    'TATGTCCACAGCAACGTAGGAGCTAGAGCCTACATCTTCAGAACCAAAAATCTGAAGTAAAAAAGAGATT'
    'AATGGCAGAAAATTTATTTCCTTGAAGTTTATTTTGCTCATTCAACAAATATCCATTGAGTGCCTCCTAT'
    'GTGTCAAGTCCTGTGCCAGGACCCTGAAATACATCAGTGATCTTAAAAAGTACAAATCCTTGCCCTCATG'
    'GAGCTCACATTCTATTGAAGTGCTTATATTTTTCTAAAATGATATGATGAAAGCTGGGTGGAAGAAATGT'
    'AATAGGTTTTTTTAAACCGTATTTTTAAAAGCTTAGGACAGTTACTTTTACTCTTCTTGATGTAATCTTT'
    'GGTTCACATATTTTGTGTATTCTATATAAAGTGCATTATAAAAGCATGTGTTGTTATGGTTTTTAATTCT'
    'TTAAAAAGTTCAAGCTCTTTAAACTATTGATAGACACAACAATATGAATTAATTTCAGAGTCATTATGCT'
    'GAGCTAAAGAAGCCATAGAAAAAAGTAAATACTGTATGATTCCATTTCTATAAAGTTCAATCATAAGCAA'
    'AACTATGGTTATAAAAATCAAAGCAGTGCTTGACTTTGAGCAAGGCAGAAGGGAAAGCAAGAGTTAACTG'
    'AAAAGGGACATGAGGGAACTTCCATGGGTTAATAAAAATGCTTTGTATCCTCATTAAAAAGAAATCCAGT'
    'TCCTGATATTTCATATCTATTTTATCTCTTTGTTCCCAAAAGCCATAGTCCATAGAGTCATCTAGAAACT'
    'CTATTTTGACTGTTAGTTAATGAGATATGAAGGGAAAAAAAATCCTAGAGCCCTTTATAGTGGGTGGGCT'
    'ACCCATCAGGCATAATTCAGTTCTCCCAACAACACACACATACTCGTCTTCATCACCCTCATAACACTTA'
    'GCCTCAGCCACCTCTTGTCCTCGATAAGTGGATTTATCCAGAAGTAAATCACAATTAAAAAGTAAAGCCT'
    'TGTGCGTGTCTTATGCATAAATCCTATATGTAGCCCATTTGCCTTCTATAACCTCTATCTACTGGGCTGT'
    'CTCTAGATAGAGCACTAGTTCCTAGACTAACTCGAAACCTCTGCCTCCCAGAATGGGCTATATAGCATGT'
    'AGGTCAGCTCCCTTAACAGTCAATACAAAAATGAC'
)

EXAMPLE_QUERY = (
    'AGCACTTTGGGAAGGCTAAGGCGGGGTTGATCACCTGAAGGTCAGGAGTTCCAAGACGCAACCTTAACCA'
    'CATGGTGAAGACTCCTGTCTCTACTAAAAAAATACAAAAATGAAGCCGGGCGGTGGTTGGCGCATGTTCT'
    'TGTAAGTCTCAGCTAACTGCAGGAAGGCTTTGAGACGGAGAATCAGTTGAACCCGGGAGGCAGAAGGTTG'
    'CAAGCGAGCCAAGATTTTGGGCGCCACTGCACTACCAGCCTGGGTGGACAGAAGCAGACTTCCTGTCCCC'
    'CCCCAAAAAAAAGGGGGGAGAGAGGAGAGAAAAAGAGAGGAGAATTGCGCAGACAACACTACGTTTTTAA'
    'ATGGTAAAATGGAAAATTGAATTAAAACTATTATTCGGATGAGCTCATTCGAGGCTTAACCTTGTTCATA'
    'AATGTATCTTCTTAATTTTTCTCTCCTTCAAAACTGCTGTCAGAACTTTGTTTATGAAAGCGAGAAAAGT'
    'AATGTTACAAAATATCTTTAGATTTTTCTTATTGCAGTGGGAAACCAGAAATATCAATCAAAATCGCAAA'
    'ATGGAGAACATTTTTCATCTTTAAGGAAGATGTTAAAAACTAAACAAACACAGAAGAAACTTAATGCAAA'
    'CTTCTTTTAAAAATGAACAATGATTCTAAATTACCGTCTTCTTGAAACACAATTTATGGCTTTTCCTGGA'
    'ATTGTTTTTTTTCACTTTCCCCTGTGGCGCTGCAAAGCTTTGTGTTTTCCCATTAGAGGAGTTTTTTCAT'
    'TCACAATGCGATGCAAGACTGAAAATTGAAAAGTATTTTACATTATTTTACGCCACAAAAGGTAGTATTC'
    'AATTTTTTTCAAACTTCTTCCAAAAATTTTTGCAAAAACATCCCTTTGTGGCAAACACACCTTAAGATTT'
    'TTGAAAAACAGTCTCCTAGGAAACCTTGTTCGCCAACCTGCAGGAAGCAGGATCAAGAAAGCAAGCCTAT'
    'GAAAAAACTGAAGAAGGAGAAAAGAAATTACATTATCCTCAAAGTGGCATTGAAGTACATCTTGGGGAAT'
    'TTCTGGCAAACAGCACTTCTCTTAACAGCTTGGATTATATCACAGTTTGAGAGGCAGTCACACCTTTTTC'
    'AATTTATTTCCACTTTTTTTAAAAACTTCCAAGCTGAAAAATTTTGGGTTCATTTATATCAGAAAAATTT'
    'GCTGCCAGAGAACTGGAGTTCCGAGGAAAGTTGGTTTATTCAGGCCAAAAAAAATTATGCAAAAACAACC'
    'ATTTGATAATTCTGTATGAATAATTGACTTGAGGGAAAAGTTTGAAATTAGAAAATGAGTTTTATTTGAG'
    'TATTATTTTTAGCTCCTTGTCCCTTTCTTCAATCAAAACACACCTCAACAAACAAACTCCAGAATTGGCT'
    'TTGAAAACGCATCTCCACTACATTCAGAATCACCTGGCAAATCTGTTTACAATATAATGATTTCCCTGAA'
    'AATCGGGCTTCAAAGATATGCTGAATCCATAAGTTTTTGAAGGAATGCAAGCCCAAAGGACATTAGCTTT'
    'TTTTTTTTTTTAACAAGCTTCCTTTGAGTAATTAAAATTTCTTCAATTGGGCAAAATGAAGGCCTTATTG'
    'TTTTTCAAAAAAGCAATCAAAGTAGGAATGTTATTGAGTCCCTTTTAAAACTCTGTCCCTCCTTACCGTC'
    'CTTCACAATAAACAAACAGTTTTTGAACATTTTTTCTCCAGGTACGTGATAATAAATCCTTAACTTTATT'
    'AGAGGAATAAGTTTTTAGATTAGAACCTTGATTAAACTTTTATGTCATAATTTGTATTCTGGAATTAAAC'
    'ACTGATTTTTTTCCTTTAAATATTTTTACTTATATCCATTTTTCTAACTGTTATTGTTAAAAAGTGGAAT'
    'GCCTGTGAATTATCCAAACCCGCAATTTTATCTCCCTCCAATTGGCTTCTTCTTTAAGAAGATTATTTCA'
    'TGAATTATCTCAATTCATTTAAACTTTTTTTTAGCATGGCGCAATGTAGAACACCTTATGATTTACACAC'
    'CCACACTTGGAATTCCATCTTCCATCATTTACTGGAAAACAGTTTTGCCGTCCTGCCCCTTGGCCATAAC'
    'CCAAGGCTTCTCAGTTCCCAACACACCAGCCACTGTTACTGCACGATTGTCTTGTTCCGGAAAAGCTTTT'
    'CCTACCCCCTCCTCAATACAAATACCTTATTCCACTTCTGCCCTTGGTTATGAAAAATCCCAATCCCCCC'
    'TTAGTGGTCTTTTGCCCTTTTTGGCTTCTGGGGGCCACTTTCCACTGTAGCTATTTGCTTACTTATTAAA'
    'ACCTTCCCTAGTAGGTTCTAAAAGGTCTTATGTATTAATTTCGCACAATATCTGAAACACATAGAAGGGT'
    'ATGGCAAAGTTAAATGTTGAATGAAGTGAAGAATGAATGGATGAAATGGATTAAAATTTGTTCTCCTCTT'
    'TCAGAGTATCCTCAGTTTCCTTAAAAGCCAAAACTAAGCCAAATCTAAGCCATAAGTCAGCTTCCCCACA'
    'ATCAAACCTTCTAAAAGAGAAAAGTTGGAAGTTAGAGTTTTTTCAATCAATCAATGGCACGTTTCTTTTT'
    'AACAGACAATTAGGGATGGGAAGAAAGAATCATTCTGGAAAAAGTCTGAAGGTTGGGAAACCACTGGGGA'
    'AATTTTGTTTTTGGAGAACTTTCAAAACCAACAGAAGCCAATTGCAGCCGACTTTTCTTTATAGCAACCG'
    'GCAGCGCATGCCCAGGAAGCCCAAGAAATCATGAATGATTGGCAACCTAACAGCAAATTCAATATGTTCC'
    'CACAGCCAACGTAGGAGCTAGAAGCCCCTTACAATCTTCAAGAAACCAAAAATCTGAAGTAAAAAAAAAA'
    'GATTTTAAATGGCAAGAAAATTTATTTCCTTGAAAAGTTTATTTTTTGCTCATTCAACAAATATCCATTG'
    'AAGTTTGCCTCCTATGTGTCAAGTCCTGTGCCCAGGACCCTGAAATTCATCCTTCATTTCATTTCAATCA'
    'TTCATTTTTCATACATTCAAACCATTACTAGCCATACTTCTATGTGGTCCGATTATTTGTGGCGAAATTA'
    'ATACATAAGACCTTTTAGAAAACCCTACTTAGGGAAGGTAATAAAGTAGCAAATAGCTTTTACAGTGGGG'
    'AGTGGCCCCAAGAAGGCAAAGGGCAAGACAGGGGAAATGGGAATTTTCAAAACCAGGGCCAGAAAGTGAA'
    'ATTAAGGGTATTTTGTATGAGGTGAGGGTAGGAAAAAAGCTTTCCGGAAAGAACAAACGTTGGCAGTAAC'
    'AGTGGGCTGGTGTGTTTTGGGAACTGGAGAAGCCTTTGGGTTATGGCAAGGAGACCGCAAAACTGGGTTT'
    'CCAGTAAAAATGATTGGAAAGATTGAATTCCAAGTGTGGGTTTGGGGTAAAAATTCATGGTGTTCTAACA'
    'TGCCATGCTAAAAAAAAAGTTATTTAAATGAAATGAAGATTCAATCCAGAAATTATCTCTTAGAGAGGCA'
    'TTGAGGAGGAATAAATTGGGTTTTGGATAATTCGACAAGGCATTTCACTTAAAAAGGTTACAAATTTGAA'
    'TCTTAAAAAGTCACAAAATCCTTTGCCCTCATGGAGCCTCACAATTCTATTGAATTTGCTTAATTATTTT'
    'TCTAAATGAAAATAATGAAAAAAAAAAAATGAAGCTGGGGTTGGAAGAAATGTAAAAATGGTTTTTTTTT'
    'TTTTTAAATGTAATTTTTTTAAAAAACTTAGGAACAGTTTATTTTACTTCTTGCTTGATGTAAATTCTTT'
    'GGTTCAACAATTTTGTGTATCTATATACAAGTGCAATTAATAAAAGCCTGTGTTGTTATGGTTTTAATTC'
    'TTTAAAAAAGTTTTCAAAGGCTCTTTAAACTATGATAGACAACACAATATGAATTAAATTTTTCAGAGCA'
    'TTATGCTGAAAGCTAAAGAAGCCATAGAAAAAAGTAAATAATGTATTGATCCCAATTTTCTATAAAAGTT'
    'CAATCATAAGCAAAACTATGGGGTTTTTATAAAAAAATCAAAGCAATGGCTTGACTTTTGAGCAAGGCAG'
    'AAGGGAAAAGCAAGAAAGTTAACTGAAAAAGGGACATGAGGGAAAAACTTCCATGGGGTTTTTAATAAAA'
    'ATGCCTTTGTATCCTCAATTAAAAAAGAAATCCAGTTTCCTGGAATATTTTTCAATAATCTATTTTTATC'
    'TCTTTGTTTTGCCCAAAAGCCAATAGTCCATGAGAGTCATCTTAGGAAAACCTCTATTTTTTGACTGTGT'
    'AGTATAATGAGAATAATGAAAGGGAAAAAAAAATCCTAGAAGCCCTTTATTAGTGGGGGTGGGCTTACCC'
    'CATTTCAAGGCAATGAATTAAGTTCTCCCAACAACACAACATATCGTCTTCAATCACCTCATAACAACTT'
    'ACCTCAGCCACCTCTTTTGTCCTGATAAGTGGGATTTATCCAGAAGTAAAATCAAATTAAAAAGTAAAAG'
    'CTTTGTGCGTGTCTTAAGCAAATCAAAATTCCTATATGTAGCCCCATTTCCTTCTTATAACCTCTATCTA'
    'TGGGGCTGTCTCTAGATACGAGCACTTAGTTTTCCCTAGACTAACTCGAAAAAACTCTTGCCTCCCAGAA'
    'TGGGCCTTTATAATACGCATGTAAGTCAGCTTTCCCCTTAACAGTCAATACAAAAATGAC'
)


def load_example() -> tuple[Sequence, Sequence, int]:
    """Return ``(reference, query, k)`` for the bundled example."""
    return (
        Sequence(EXAMPLE_REFERENCE, 'Sequence 1'),
        Sequence(EXAMPLE_QUERY, 'Sequence 2'),
        EXAMPLE_K,
    )
