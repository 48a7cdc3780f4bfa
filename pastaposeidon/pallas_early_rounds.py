"""Round constants for the first 32 rounds of Poseidon-128 over the Pallas base field.

The values are those of the standard P128Pow5T3 parameters (R_F = 8, R_P = 56,
secure MDS index 0). Each element is given as four little-endian 64-bit limbs.
"""

from __future__ import annotations

from functools import lru_cache

from .field import Fp

Round = tuple[Fp, Fp, Fp]

_EARLY_LIMBS = (
    (
        (0x5753_8C25_9642_6303, 0x4E71_162F_3100_3B70, 0x353F_628F_76D1_10F3, 0x360D_7470_611E_473D),
        (0xBDB7_4213_BF63_188B, 0x4908_AC2F_12EB_E06F, 0x5DC3_C6C5_FEBF_AA31, 0x2BAB_94D7_AE22_2D13),
        (0x0939_D927_53CC_5DC8, 0xEF77_E7D7_3676_6C5D, 0x2BF0_3E1A_29AA_871F, 0x150C_93FE_F652_FB1C),
    ),
    (
        (0x1425_9DCE_5377_82B2, 0x03CC_0A60_141E_894E, 0x955D_55DB_56DC_57C1, 0x3270_661E_6892_8B3A),
        (0xCE9F_B9FF_C345_AFB3, 0xB407_C370_F2B5_A1CC, 0xA0B7_AFE4_E205_7299, 0x073F_116F_0412_2E25),
        (0x8EBA_D76F_C715_54D8, 0x55C9_CD20_61AE_93CA, 0x7AFF_D09C_1F53_F5FD, 0x2A32_EC5C_4EE5_B183),
    ),
    (
        (0x2D8C_CBE2_92EF_EEAD, 0x634D_24FC_6E25_59F2, 0x651E_2CFC_7406_28CA, 0x2703_26EE_039D_F19E),
        (0xA068_FC37_C182_E274, 0x8AF8_95BC_E012_F182, 0xDC10_0FE7_FCFA_5491, 0x27C6_642A_C633_BC66),
        (0x9CA1_8682_E26D_7FF9, 0x710E_1FB6_AB97_6A45, 0xD27F_5739_6989_129D, 0x1BDF_D8B0_1401_C70A),
    ),
    (
        (0xC832_D824_261A_35EA, 0xF4F6_FB3F_9054_D373, 0x14B9_D6A9_C84D_D678, 0x162A_14C6_2F9A_89B8),
        (0xF798_2466_7B5B_6BEC, 0xAC0A_1FC7_1E2C_F0C0, 0x2AF6_F79E_3127_FEEA, 0x2D19_3E0F_76DE_586B),
        (0x5D0B_F58D_C8A4_AA94, 0x4FEF_F829_8499_0FF8, 0x8169_6EF1_104E_674F, 0x044C_A3CC_4A85_D73B),
    ),
    (
        (0x6198_785F_0CD6_B9AF, 0xB8D9_E2D4_F314_F46F, 0x1D04_5341_6D3E_235C, 0x1CBA_F2B3_71DA_C6A8),
        (0x343E_0761_0F3F_EDE5, 0x293C_4AB0_38FD_BBDC, 0x0E6C_49D0_61B6_B5F4, 0x1D5B_2777_692C_205B),
        (0xF60E_971B_8D73_B04F, 0x06A9_ADB0_C1E6_F962, 0xAA30_535B_DD74_9A7E, 0x2E9B_DBBA_3DD3_4BFF),
    ),
    (
        (0x035A_1366_1F22_418B, 0xDE40_FBE2_6D04_7B05, 0x8BD5_BAE3_6969_299F, 0x2DE1_1886_B180_11CA),
        (0xBC99_8884_BA96_A721, 0x2AB9_395C_449B_E947, 0x0D5B_4A3F_1841_DCD8, 0x2E07_DE17_80B8_A70D),
        (0x825E_4C2B_B749_25CA, 0x2504_40A9_9D6B_8AF3, 0xBBDB_63DB_D52D_AD16, 0x0F69_F185_4D20_CA0C),
    ),
    (
        (0x816C_0594_22DC_705E, 0x6CE5_1135_07F9_6DE9, 0x0D13_5DC6_39FB_09A4, 0x2EB1_B254_17FE_1767),
        (0xB8B1_BDF4_953B_D82C, 0xFF36_C661_D26C_C42D, 0x8C24_CB44_C3FA_B48A, 0x115C_D0A0_643C_FB98),
        (0xDE80_1612_311D_04CD, 0xBB57_DDF1_4E0F_958A, 0x066D_7378_B999_868B, 0x26CA_293F_7B2C_462D),
    ),
    (
        (0xF520_9D14_B248_20CA, 0x0F16_0BF9_F71E_967F, 0x2A83_0AA1_6241_2CD9, 0x17BF_1B93_C4C7_E01A),
        (0x05C8_6F2E_7DC2_93C5, 0xE03C_0354_BD8C_FD38, 0xA24F_8456_369C_85DF, 0x35B4_1A7A_C4F3_C571),
        (0x72AC_156A_F435_D09E, 0x64E1_4D3B_EB2D_DDDE, 0x4359_2799_4849_BEA9, 0x3B14_8008_0523_C439),
    ),
    (
        (0x2716_18D8_74B1_4C6D, 0x08E2_8644_2A2D_3EB2, 0x4950_856D_C907_D575, 0x2CC6_8100_31DC_1B0D),
        (0x91F3_18C0_9F0C_B566, 0x9E51_7AA9_3B78_341D, 0x0596_18E2_AFD2_EF99, 0x25BD_BBED_A1BD_E8C1),
        (0xC631_3487_073F_7F7B, 0x2A5E_D0A2_7B61_926C, 0xB95F_33C2_5DDE_8AC0, 0x392A_4A87_58E0_6EE8),
    ),
    (
        (0xE7BB_CEF0_2EB5_866C, 0x5E6A_6FD1_5DB8_9365, 0x9AA6_111F_4DE0_0948, 0x272A_5587_8A08_442B),
        (0x9B92_5B3C_5B21_E0E2, 0xA6EB_BA01_1694_DD12, 0xEFA1_3C4E_60E2_6239, 0x2D5B_308B_0CF0_2CDF),
        (0xEF38_C57C_3116_73AC, 0x44DF_F42F_18B4_6C56, 0xDD5D_293D_72E2_E5F2, 0x1654_9FC6_AF2F_3B72),
    ),
    (
        (0x9B71_26D9_B468_60DF, 0x7639_8265_3442_0311, 0xFA69_C3A2_AD52_F76D, 0x1B10_BB7A_82AF_CE39),
        (0x90D2_7F6A_00B7_DFC8, 0xD1B3_6968_BA04_05C0, 0xC79C_2DF7_DC98_A3BE, 0x0F1E_7505_EBD9_1D2F),
        (0xFF45_7756_B819_BB20, 0x797F_D6E3_F18E_B1CA, 0x537A_7497_A3B4_3F46, 0x2F31_3FAF_0D3F_6187),
    ),
    (
        (0xF0BC_3E73_2ECB_26F6, 0x5CAD_11EB_F0F7_CEB8, 0xFA3C_A61C_0ED1_5BC5, 0x3A5C_BB6D_E450_B481),
        (0x8655_27CB_CA91_5982, 0x51BA_A6E2_0F89_2B62, 0xD920_86E2_53B4_39D6, 0x3DAB_54BC_9BEF_688D),
        (0x3680_45AC_F2B7_1AE3, 0x4C24_B33B_410F_EFD4, 0xE280_D316_7012_3F74, 0x06DB_FB42_B979_884D),
    ),
    (
        (0xA7FC_32D2_2F18_B9D3, 0xB8D2_DE72_E3D2_C9EC, 0xC6F0_39EA_1973_A63E, 0x068D_6B46_08AA_E810),
        (0x2B5D_FCC5_5725_55DF, 0xB868_A7D7_E1F1_F69A, 0x0EE2_58C9_B8FD_FCCD, 0x366E_BFAF_A3AD_381C),
        (0xE6BC_229E_95BC_76B1, 0x7EF6_6D89_D044_D022, 0x04DB_3024_F41D_3F56, 0x3967_8F65_512F_1EE4),
    ),
    (
        (0xE534_C88F_E53D_85FE, 0xCF82_C25F_99DC_01A4, 0xD58B_7750_A3BC_2FE1, 0x2166_8F01_6A80_63C0),
        (0x4BEF_429B_C533_1608, 0xE34D_EA56_439F_E195, 0x1BC7_4936_3E98_A768, 0x39D0_0994_A8A5_046A),
        (0x770C_956F_60D8_81B3, 0xB163_D416_05D3_9F99, 0x6B20_3BBE_12FB_3425, 0x1F9D_BDC3_F843_1263),
    ),
    (
        (0x9794_A9F7_C336_EAB2, 0xBE0B_C829_FE5E_66C6, 0xE5F1_7B9E_0EE0_CAB6, 0x0277_45A9_CDDF_AD95),
        (0x5202_5657_ABD8_AEE0, 0x2FA4_3FE2_0A45_C78D, 0x788D_695C_61E9_3212, 0x1CEC_0803_C504_B635),
        (0xD387_2A95_59A0_3A73, 0xED50_82C8_DBF3_1365, 0x7207_7448_EF87_CC6E, 0x1235_23D7_5E9F_ABC1),
    ),
    (
        (0x0017_79E3_A1D3_57F4, 0x27FE_BA35_975E_E7E5, 0xF419_B848_E5D6_94BF, 0x1723_D145_2C9C_F02D),
        (0x9DAB_1EE4_DCF9_6622, 0x21C3_F776_F572_836D, 0xFCC0_573D_7E61_3694, 0x1739_D180_A160_10BD),
        (0x7029_0452_042D_048D, 0xFAFA_96FB_EB0A_B893, 0xACCE_3239_1794_B627, 0x2D4E_6354_DA9C_C554),
    ),
    (
        (0x670B_CF6F_8B48_5DCD, 0x8F3B_D43F_9926_0621, 0x4A86_9553_C9D0_07F8, 0x153E_E614_2E53_5E33),
        (0xD258_D2E2_B778_2172, 0x968A_D442_4AF8_3700, 0x635E_F7E7_A430_B486, 0x0C45_BFD3_A69A_AA65),
        (0x0E56_33D2_51F7_3307, 0x6897_AC0A_8FFA_5FF1, 0xF2D5_6AEC_8314_4600, 0x0ADF_D53B_256A_6957),
    ),
    (
        (0xAC9D_36A8_B751_6D63, 0x3F87_B28F_1C1B_E4BD, 0x8CD1_726B_7CBA_B8EE, 0x315D_2AC8_EBDB_AC3C),
        (0x299C_E44E_A423_D8E1, 0xC9BB_60D1_F695_9879, 0xCFAE_C23D_2B16_883F, 0x1B84_7271_2D02_EEF4),
        (0xC4A5_4041_98AD_F70C, 0x367D_2C54_E369_28C9, 0xBD0B_70FA_2255_EB6F, 0x3C1C_D07E_FDA6_FF24),
    ),
    (
        (0xBBE5_23AE_F9AB_107A, 0x4A16_073F_738F_7E0C, 0x687F_4E51_B2E1_DCD3, 0x1360_52D2_6BB3_D373),
        (0x676C_36C2_4EF9_67DD, 0x7B3C_FBB8_7303_2681, 0xC1BD_D859_A123_2A1D, 0x16C9_6BEE_F6A0_A848),
        (0x067E_EC7F_2D63_40C4, 0x0123_87BA_B4F1_662D, 0x2AB7_FED8_F499_A9FB, 0x284B_38C5_7FF6_5C26),
    ),
    (
        (0xAF1D_FF20_4C92_2F86, 0xFC06_772C_1C04_11A6, 0x39E2_4219_8897_D17C, 0x0C59_93D1_75E8_1F66),
        (0xBBF5_3F67_B1F8_7B15, 0xF248_87AD_48E1_7759, 0xFCDA_655D_1BA9_C8F9, 0x03BF_7A3F_7BD0_43DA),
        (0x9B5C_D09E_36D8_BE62, 0x4C8F_9CBE_69F0_E827, 0xB0CF_9995_67F0_0E73, 0x3188_FE4E_E9F9_FAFB),
    ),
    (
        (0xAFEA_99A2_EC6C_595A, 0x3AF5_BF77_C1C4_2652, 0x5A39_768C_480D_61E1, 0x171F_528C_CF65_8437),
        (0x5A05_63B9_B8E9_F1D5, 0x812C_3286_EE70_0067, 0x196E_4185_9B35_EF88, 0x12F4_175C_4AB4_5AFC),
        (0x0E74_D4D3_6911_8B79, 0x7E23_E1AA_BE96_CFAB, 0x8F8F_DCF8_00A9_AC69, 0x3A50_9E15_5CB7_EBFD),
    ),
    (
        (0x9871_2C65_678C_FD30, 0x984B_C8F2_E4C1_B69E, 0x1A89_920E_2504_C3B3, 0x10F2_A685_DF4A_27C8),
        (0xE8A1_6728_CC9D_4918, 0x5457_3C93_33C5_6321, 0x1D8D_93D5_4AB9_1A0E, 0x09E5_F497_90C8_A0E2),
        (0x609A_7403_47CF_5FEA, 0x42D1_7ED6_EE0F_AB7E, 0x2BF3_5705_D9F8_4A34, 0x352D_69BE_D80E_E3E5),
    ),
    (
        (0x3A75_8AF6_FA84_E0E8, 0xC634_DEBD_281B_76A6, 0x4915_62FA_F2B1_90D3, 0x058E_E73B_A9F3_F293),
        (0x621A_1325_10A4_3904, 0x092C_B921_19BC_76BE, 0xCD0F_1FC5_5B1A_3250, 0x232F_99CC_911E_DDD9),
        (0xC3B9_7C1E_301B_C213, 0xF9EF_D52C_A6BC_2961, 0x86C2_2C6C_5D48_69F0, 0x201B_EED7_B8F3_AB81),
    ),
    (
        (0xBF6B_3431_BA94_E9BC, 0x2938_8842_744A_1210, 0xA1C9_291D_5860_2F51, 0x1376_DCE6_5800_30C6),
        (0x6454_843C_5486_D7B3, 0x072B_A8B0_2D92_E722, 0x2B33_56C3_8238_F761, 0x1793_199E_6FD6_BA34),
        (0x06A3_F1D3_B433_311B, 0x3C66_160D_C62A_ACAC, 0x9FEE_9C20_C87A_67DF, 0x22DE_7A74_88DC_C735),
    ),
    (
        (0x30D6_E3FD_516B_47A8, 0xDBE0_B77F_AE77_E1D0, 0xDF8F_F37F_E2D8_EDF8, 0x3514_D5E9_066B_B160),
        (0x1937_7427_137A_81C7, 0xFF45_3D6F_900F_144A, 0xF919_A00D_ABBF_5FA5, 0x30CD_3006_931A_D636),
        (0x5B6A_7422_0692_B506, 0x8F9E_4B2C_AE2E_BB51, 0x41F8_1A5C_F613_C8DF, 0x253D_1A5C_5293_4127),
    ),
    (
        (0x73F6_66CB_86A4_8E8E, 0x851B_3A59_C990_FAFC, 0xA35E_9613_E7F5_FE92, 0x035B_461C_02D7_9D19),
        (0x7CFB_F86A_3AA0_4780, 0x92B1_283C_2D5F_CCDE, 0x5BC0_0EED_D56B_93E0, 0x23A9_9280_79D1_75BD),
        (0xF1E4_CCD7_3FA0_0A82, 0xB5E2_EA34_36EE_F957, 0xF159_4A07_63C6_11AB, 0x13A7_785A_E134_EA92),
    ),
    (
        (0xBBF0_4F52_52DE_4279, 0x3889_C578_6344_6D88, 0x4962_AE3C_0DA1_7E31, 0x39FC_E308_B7D4_3C57),
        (0x3B57_E344_89B5_3FAD, 0xBEF0_0A08_C6ED_38D2, 0xC0FD_F016_62F6_0D22, 0x1AAE_1883_3F8E_1D3A),
        (0x5551_3E03_3398_513F, 0x27C1_B3FD_8F85_D8A8, 0x8B2E_80C0_64FD_83ED, 0x1A76_1CE8_2400_AF01),
    ),
    (
        (0x5244_CA74_9B73_E481, 0xDCF6_AF28_30A5_0287, 0x16DD_1A87_CA22_E1CC, 0x275A_03E4_5ADD_A7C3),
        (0x58A2_53CF_B6A9_5786, 0x07E5_6145_3FC5_648B, 0xEB08_E47E_5FEA_BCF8, 0x2E5A_10F0_8B5A_B8BB),
        (0xE033_D82C_EFE7_8CE3, 0xC141_A5B6_D594_BEC4, 0xB84E_9C33_3B29_32F1, 0x1459_CB85_8720_8473),
    ),
    (
        (0x5CEC_7E7B_338F_BE1B, 0x52F9_332F_BFFC_FBBD, 0x7B92_CE81_0E14_A400, 0x193A_E592_1D78_B5DE),
        (0x6022_4BE6_7248_E82C, 0x3743_84F4_A072_8205, 0x8911_1FB2_C466_0281, 0x3097_898A_5D00_11A4),
        (0x5499_80DE_8629_30F5, 0x1979_B2D1_C465_B4D9, 0x5717_82FD_96CE_54B4, 0x378D_97BF_8C86_4AE7),
    ),
    (
        (0x37EA_32A9_71D1_7884, 0xDBC7_F5CB_4609_3421, 0x8813_6287_CE37_6B08, 0x2EB0_4EA7_C01D_97EC),
        (0xEAD3_726F_1AF2_E7B0, 0x861C_BDA4_7680_4E6C, 0x2302_A1C2_2E49_BAEC, 0x3642_5347_EA03_F641),
        (0xECD6_27E5_9590_D09E, 0x3F5B_5CA5_A19A_9701, 0xCC99_6CD8_5C98_A1D8, 0x26B7_2DF4_7408_AD42),
    ),
    (
        (0x59BE_CE31_F0A3_1E95, 0xDE01_212E_E458_8F89, 0x1F05_636C_610B_89AA, 0x1301_80E4_4E29_24DB),
        (0x9EA8_E7BC_7926_3550, 0xDF77_93CC_89E5_B52F, 0x7327_5ACA_ED5F_579C, 0x219E_9773_7D39_79BA),
        (0x9C12_635D_F251_D153, 0x3B06_72DD_7D42_CBB4, 0x3461_363F_81C4_89A2, 0x3CDB_9359_8A5C_A528),
    ),
    (
        (0x2861_CE16_F219_D5A9, 0x4AD0_4470_45A7_C5AA, 0x2072_4B92_7A0C_A81C, 0x0E59_E6F3_32D7_ED37),
        (0x43B0_A3FC_FF20_36BD, 0x172C_C07B_9D33_FBF9, 0x3D73_6946_7222_697A, 0x1B06_4342_D51A_4275),
        (0x3EB3_1022_8A0E_5F6C, 0x78FA_9FB9_1712_21B7, 0x2F36_3C55_B288_2E0B, 0x30B8_2A99_8CBD_8E8A),
    ),
)


@lru_cache(maxsize=None)
def early_round_constants() -> tuple[Round, ...]:
    """Return the round constants of rounds 0 to 31, three elements per round."""
    return tuple(
        tuple(Fp.from_raw(limbs) for limbs in row)  # type: ignore[misc]
        for row in _EARLY_LIMBS
    )


__all__ = ["early_round_constants", "Round"]