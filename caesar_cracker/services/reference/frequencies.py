"""
Reference distribution of ASCII characters in English prose.

Entry ``i`` is the relative frequency of the character with code ``i``; the
entries sum to one.
"""

import numpy as np

# fmt: off
_ASCII_FREQUENCIES: tuple[float, ...] = (
    0.0, 0.0, 0.0, 0.0,  # 0-3
    0.0, 6.338218895840436e-08, 0.0, 0.0,  # 4-7
    0.0, 1.2676437791680872e-07, 0.019578060965172565, 0.0,  # 8-11
    0.0, 0.0, 0.0, 0.0,  # 12-15
    0.0, 0.0, 0.0, 0.0,  # 16-19
    0.0, 0.0, 0.0, 0.0,  # 20-23
    0.0, 0.0, 0.0, 6.338218895840436e-08,  # 24-27
    0.0, 0.0, 6.338218895840436e-08, 0.0,  # 28-31
    0.167564443682168, 5.070575116672349e-07, 0.0015754276887500987, 0.0,  # 32-35
    5.070575116672349e-07, 0.0, 2.0282300466689395e-06, 0.0015078622753204398,  # 36-39
    0.0003307916441739124, 0.0003314254660634964, 4.436753227088305e-07, 1.5211725350017046e-06,  # 40-43
    0.008634492219614468, 0.002076717421222119, 0.011055184780313847, 0.000519607185080999,  # 44-47
    0.005918945715880591, 0.004937789430804492, 0.002756237869045172, 0.0021865587546870337,  # 48-51
    0.0018385271551164353, 0.0025269211093936652, 0.0019199098857390264, 0.0018243295447897528,  # 52-55
    0.002552781042488694, 0.002442242504945237, 0.00012036277683200988, 7.41571610813331e-06,  # 56-59
    0.00044107665296153596, 2.5352875583361743e-07, 0.0004404428310719519, 4.626899793963519e-06,  # 60-63
    6.338218895840436e-08, 0.0024774830020061096, 0.0017387002075069484, 0.002987392712176473,  # 64-67
    0.0010927723198318497, 0.0012938206232079082, 0.001220297284016159, 0.0009310209736100016,  # 68-71
    0.0008752446473266058, 0.0020910417959267183, 0.0008814561018445294, 0.0003808001912620934,  # 72-75
    0.0010044809306127922, 0.0018134911904778657, 0.0012758834637326799, 0.0008210528757671701,  # 76-79
    0.00138908405321239, 0.00010001709417636208, 0.0011037374385216535, 0.0030896915651553373,  # 80-83
    0.0030701064687671904, 0.0010426370083657518, 0.0002556203680692448, 0.0008048270353938186,  # 84-87
    6.572732994986532e-05, 0.00025194420110965734, 8.619977698342993e-05, 6.97204078542448e-07,  # 88-91
    0.0, 6.338218895840436e-07, 2.2183766135441526e-06, 1.2676437791680872e-07,  # 92-95
    0.0, 0.0612553996079051, 0.01034644514338097, 0.02500268898936656,  # 96-99
    0.03188948073064199, 0.08610229517681191, 0.015750347191785568, 0.012804659959943725,  # 100-103
    0.02619237267611581, 0.05480626188138746, 0.000617596049210692, 0.004945712204424292,  # 104-107
    0.03218192615049607, 0.018140172626462205, 0.05503703643138501, 0.0541904405334676,  # 108-111
    0.017362092874808832, 0.00100853739070613, 0.051525029341199825, 0.0518864979648296,  # 112-115
    0.0632964962389326, 0.019247776378510318, 0.007819143740853554, 0.009565830104169261,  # 116-119
    0.0023064144740073764, 0.010893686962847832, 0.0005762708620098124, 6.338218895840436e-08,  # 120-123
    0.0, 0.0, 1.9014656687521307e-07, 3.1057272589618137e-06,  # 124-127
)
# fmt: on


def _freeze(values: tuple[float, ...]) -> np.ndarray:
    table = np.array(values, dtype=np.float64)
    table.setflags(write=False)
    return table


ASCII_FREQUENCIES: np.ndarray = _freeze(_ASCII_FREQUENCIES)
