"""CIE 1931 x-bar colour-matching function, 360..830 nm in 1 nm steps."""

X_CURVE: tuple[float, ...] = (
    0.0001299000, 0.0001458470, 0.0001638021, 0.0001840037, 0.0002066902,
    0.0002321000, 0.0002607280, 0.0002930750, 0.0003293880, 0.0003699140,
    0.0004149000, 0.0004641587, 0.0005189860, 0.0005818540, 0.0006552347,
    0.0007416000, 0.0008450296, 0.0009645268, 0.001094949, 0.001231154,
    0.001368000, 0.001502050, 0.001642328, 0.001802382, 0.001995757,
    0.002236000, 0.002535385, 0.002892603, 0.003300829, 0.003753236,
    0.004243000, 0.004762389, 0.005330048, 0.005978712, 0.006741117,
    0.007650000, 0.008751373, 0.01002888, 0.01142170, 0.01286901,
    0.01431000, 0.01570443, 0.01714744, 0.01878122, 0.02074801,
    0.02319000, 0.02620736, 0.02978248, 0.03388092, 0.03846824,
    0.04351000, 0.04899560, 0.05502260, 0.06171880, 0.06921200,
    0.07763000, 0.08695811, 0.09717672, 0.1084063, 0.1207672,
    0.1343800, 0.1493582, 0.1653957, 0.1819831, 0.1986110,
    0.2147700, 0.2301868, 0.2448797, 0.2587773, 0.2718079,
    0.2839000, 0.2949438, 0.3048965, 0.3137873, 0.3216454,
    0.3285000, 0.3343513, 0.3392101, 0.3431213, 0.3461296,
    0.3482800, 0.3495999, 0.3501474, 0.3500130, 0.3492870,
    0.3480600, 0.3463733, 0.3442624, 0.3418088, 0.3390941,
    0.3362000, 0.3331977, 0.3300411, 0.3266357, 0.3228868,
    0.3187000, 0.3140251, 0.3088840, 0.3032904, 0.2972579,
    0.2908000, 0.2839701, 0.2767214, 0.2689178, 0.2604227,
    0.2511000, 0.2408475, 0.2298512, 0.2184072, 0.2068115,
    0.1953600, 0.1842136, 0.1733273, 0.1626881, 0.1522833,
    0.1421000, 0.1321786, 0.1225696, 0.1132752, 0.1042979,
    0.09564000, 0.08729955, 0.07930804, 0.07171776, 0.06458099,
    0.05795001, 0.05186211, 0.04628152, 0.04115088, 0.03641283,
    0.03201000, 0.02791720, 0.02414440, 0.02068700, 0.01754040,
    0.01470000, 0.01216179, 0.009919960, 0.007967240, 0.006296346,
    0.004900000, 0.003777173, 0.002945320, 0.002424880, 0.002236293,
    0.002400000, 0.002925520, 0.003836560, 0.005174840, 0.006982080,
    0.009300000, 0.01214949, 0.01553588, 0.01947752, 0.02399277,
    0.02910000, 0.03481485, 0.04112016, 0.04798504, 0.05537861,
    0.06327000, 0.07163501, 0.08046224, 0.08973996, 0.09945645,
    0.1096000, 0.1201674, 0.1311145, 0.1423679, 0.1538542,
    0.1655000, 0.1772571, 0.1891400, 0.2011694, 0.2133658,
    0.2257499, 0.2383209, 0.2510668, 0.2639922, 0.2771017,
    0.2904000, 0.3038912, 0.3175726, 0.3314384, 0.3454828,
    0.3597000, 0.3740839, 0.3886396, 0.4033784, 0.4183115,
    0.4334499, 0.4487953, 0.4643360, 0.4800640, 0.4959713,
    0.5120501, 0.5282959, 0.5446916, 0.5612094, 0.5778215,
    0.5945000, 0.6112209, 0.6279758, 0.6447602, 0.6615697,
    0.6784000, 0.6952392, 0.7120586, 0.7288284, 0.7455188,
    0.7621000, 0.7785432, 0.7948256, 0.8109264, 0.8268248,
    0.8425000, 0.8579325, 0.8730816, 0.8878944, 0.9023181,
    0.9163000, 0.9297995, 0.9427984, 0.9552776, 0.9672179,
    0.9786000, 0.9893856, 0.9995488, 1.0090892, 1.0180064,
    1.0263000, 1.0339827, 1.0409860, 1.0471880, 1.0524667,
    1.0567000, 1.0597944, 1.0617992, 1.0628068, 1.0629096,
    1.0622000, 1.0607352, 1.0584436, 1.0552244, 1.0509768,
    1.0456000, 1.0390369, 1.0313608, 1.0226662, 1.0130477,
    1.0026000, 0.9913675, 0.9793314, 0.9664916, 0.9528479,
    0.9384000, 0.9231940, 0.9072440, 0.8905020, 0.8729200,
    0.8544499, 0.8350840, 0.8149460, 0.7941860, 0.7729540,
    0.7514000, 0.7295836, 0.7075888, 0.6856022, 0.6638104,
    0.6424000, 0.6215149, 0.6011138, 0.5811052, 0.5613977,
    0.5419000, 0.5225995, 0.5035464, 0.4847436, 0.4661939,
    0.4479000, 0.4298613, 0.4120980, 0.3946440, 0.3775333,
    0.3608000, 0.3444563, 0.3285168, 0.3130192, 0.2980011,
    0.2835000, 0.2695448, 0.2561184, 0.2431896, 0.2307272,
    0.2187000, 0.2070971, 0.1959232, 0.1851708, 0.1748323,
    0.1649000, 0.1553667, 0.1462300, 0.1374900, 0.1291467,
    0.1212000, 0.1136397, 0.1064650, 0.09969044, 0.09333061,
    0.08740000, 0.08190096, 0.07680428, 0.07207712, 0.06768664,
    0.06360000, 0.05980685, 0.05628216, 0.05297104, 0.04981861,
    0.04677000, 0.04378405, 0.04087536, 0.03807264, 0.03540461,
    0.03290000, 0.03056419, 0.02838056, 0.02634484, 0.02445275,
    0.02270000, 0.02108429, 0.01959988, 0.01823732, 0.01698717,
    0.01584000, 0.01479064, 0.01383132, 0.01294868, 0.01212920,
    0.01135916, 0.01062935, 0.009938846, 0.009288422, 0.008678854,
    0.008110916, 0.007582388, 0.007088746, 0.006627313, 0.006195408,
    0.005790346, 0.005409826, 0.005052583, 0.004717512, 0.004403507,
    0.004109457, 0.003833913, 0.003575748, 0.003334342, 0.003109075,
    0.002899327, 0.002704348, 0.002523020, 0.002354168, 0.002196616,
    0.002049190, 0.001910960, 0.001781438, 0.001660110, 0.001546459,
    0.001439971, 0.001340042, 0.001246275, 0.001158471, 0.001076430,
    0.0009999493, 0.0009287358, 0.0008624332, 0.0008007503, 0.0007433960,
    0.0006900786, 0.0006405156, 0.0005945021, 0.0005518646, 0.0005124290,
    0.0004760213, 0.0004424536, 0.0004115117, 0.0003829814, 0.0003566491,
    0.0003323011, 0.0003097586, 0.0002888871, 0.0002695394, 0.0002515682,
    0.0002348261, 0.0002191710, 0.0002045258, 0.0001908405, 0.0001780654,
    0.0001661505, 0.0001550236, 0.0001446219, 0.0001349098, 0.0001258520,
    0.0001174130, 0.0001095515, 0.0001022245, 0.00009539445, 0.00008902390,
    0.00008307527, 0.00007751269, 0.00007231304, 0.00006745778, 0.00006292844,
    0.00005870652, 0.00005477028, 0.00005109918, 0.00004767654, 0.00004448567,
    0.00004150994, 0.00003873324, 0.00003614203, 0.00003372352, 0.00003146487,
    0.00002935326, 0.00002737573, 0.00002552433, 0.00002379376, 0.00002217870,
    0.00002067383, 0.00001927226, 0.00001796640, 0.00001674991, 0.00001561648,
    0.00001455977, 0.00001357387, 0.00001265436, 0.00001179723, 0.00001099844,
    0.00001025398, 0.000009559646, 0.000008912044, 0.000008308358, 0.000007745769,
    0.000007221456, 0.000006732475, 0.000006276423, 0.000005851304, 0.000005455118,
    0.000005085868, 0.000004741466, 0.000004420236, 0.000004120783, 0.000003841716,
    0.000003581652, 0.000003339127, 0.000003112949, 0.000002902121, 0.000002705645,
    0.000002522525, 0.000002351726, 0.000002192415, 0.000002043902, 0.000001905497,
    0.000001776509, 0.000001656215, 0.000001544022, 0.000001439440, 0.000001341977,
    0.000001251141,
)