"""Poseidon-128 constants over the Pallas base field.

These are the standard P128Pow5T3 parameters (R_F = 8, R_P = 56, secure MDS
index 0) for the prime
0x40000000000000000000000000000000224698fc094cf91b992d30ed00000001.
Each element is given as four little-endian 64-bit limbs.
"""

from __future__ import annotations

from functools import lru_cache

from .field import Fp
from .mds import Matrix
from .pallas_early_rounds import Round, early_round_constants

_LATE_LIMBS = (
    (
        (0xE46F_6D42_9874_0107, 0x8AD7_1EA7_15BE_0573, 0x63DF_7A76_E858_A4AA, 0x23E4_AB37_183A_CBA4),
        (0xFCA9_95E2_B599_14A1, 0xACFE_1464_0DE0_44F2, 0x5D33_094E_0BED_A75B, 0x2795_D5C5_FA42_8022),
        (0xC26D_909D_EE8B_53C0, 0xA668_7C3D_F16C_8FE4, 0xD765_F26D_D03F_4C45, 0x3001_CA40_1E89_601C),
    ),
    (
        (0xE7FE_A6BD_F347_1380, 0xE84B_5BEB_AE4E_501D, 0xF7BF_86E8_9280_827F, 0x0072_E45C_C676_B08E),
        (0xD0C5_4DDE_B26B_86C0, 0xB648_29E2_D40E_41BD, 0xE2AB_E4C5_18CE_599E, 0x13DE_7054_8487_4BB5),
        (0x3891_5B43_2A99_59A5, 0x82BB_18E5_AF1B_05BB, 0x3159_50F1_211D_EFE8, 0x0408_A9FC_F9D6_1ABF),
    ),
    (
        (0x3407_0CBE_E268_86A0, 0xAE4D_23B0_B41B_E9A8, 0xBB4E_4A14_00CC_D2C4, 0x2780_B9E7_5B55_676E),
        (0x9405_5920_98B4_056F, 0xDC4D_8FBE_FE24_405A, 0xF803_33EC_8563_4AC9, 0x3A57_0D4D_7C4E_7AC3),
        (0x78D2_B247_8995_20B4, 0xE2CC_1507_BEBD_CC62, 0xF347_C247_FCF0_9294, 0x0C13_CCA7_CB1F_9D2C),
    ),
    (
        (0x2E8C_88F7_7074_70E0, 0x0B50_BB2E_B82D_F74D, 0xD261_4A19_7C6B_794B, 0x14F5_9BAA_03CD_0CA4),
        (0xBE52_476E_0A16_F3BE, 0xA51D_54ED_E661_67F5, 0x6F54_6E17_04C3_9C60, 0x307D_EFEE_925D_FB43),
        (0x380B_67D8_0473_DCE3, 0x6611_0683_6ADF_E5E7, 0x7A07_E767_4B5A_2621, 0x1960_CD51_1A91_E060),
    ),
    (
        (0x15AA_F1F7_7125_89DD, 0xB8EE_335D_8828_4CBE, 0xCA2A_D0FB_5667_2500, 0x2301_EF9C_63EA_84C5),
        (0x5E68_478C_4D60_27A9, 0xC861_82D1_B424_6B58, 0xD10F_4CD5_2BE9_7F6B, 0x029A_5A47_DA79_A488),
        (0x2CC4_F962_EAAE_2260, 0xF97F_E46B_6A92_5428, 0x2360_D17D_890E_55CB, 0x32D7_B16A_7F11_CC96),
    ),
    (
        (0xC0CA_B915_D536_3D9F, 0xA5F2_404C_D7B3_5EB0, 0x18E8_57A9_8D49_8CF7, 0x2670_3E48_C03B_81CA),
        (0xF691_123A_E112_B928, 0xF443_88BD_6B89_221E, 0x88AC_8D25_A246_03F1, 0x0486_82A3_5B32_65BC),
        (0x3AB7_DEFC_B8D8_03E2, 0x91D6_E171_5164_775E, 0xD72C_DDC6_CF06_B507, 0x06B1_3904_41FA_7030),
    ),
    (
        (0xBCD7_9541_4A6E_2E86, 0x43B3_60F6_386A_86D7, 0x1689_426D_CE05_FCD8, 0x31AA_0EEB_868C_626D),
        (0xED77_F5D5_76B9_9CC3, 0x90EF_D8F4_1B20_78B2, 0x057A_BAD3_764C_104B, 0x2394_64F7_5BF7_B6AF),
        (0xB2CB_4873_07C1_CECF, 0xA5CC_47C5_9654_B2A7, 0xA45E_19ED_813A_54AB, 0x0A64_D4C0_4FD4_26BD),
    ),
    (
        (0x1F73_1532_2F65_8735, 0x777C_7A92_1A06_2E9D, 0x576A_4AD2_5986_0FB1, 0x21FB_BDBB_7367_0734),
        (0x6743_2400_3FC5_2146, 0x5B86_D294_63D3_1564, 0xD937_1CA2_EB95_ACF3, 0x31B8_6F3C_F017_05D4),
        (0x7045_F48A_A4EB_4F6F, 0x1354_1D65_157E_E1CE, 0x05EF_1736_D090_56F6, 0x2BFD_E533_5437_7C91),
    ),
    (
        (0x5A13_A58D_2001_1E2F, 0xF4D5_239C_11D0_EAFA, 0xD558_F36E_65F8_ECA7, 0x1233_CA93_6EC2_4671),
        (0x6E70_AF0A_7A92_4B3A, 0x8780_58D0_234A_576F, 0xC437_846D_8E0B_2B30, 0x27D4_52A4_3AC7_DEA2),
        (0xA025_76B9_4392_F980, 0x6A30_641A_1C3D_87B2, 0xE816_EA8D_A493_E0FA, 0x2699_DBA8_2184_E413),
    ),
    (
        (0x608C_6F7A_61B5_6E55, 0xF185_8466_4F8C_AB49, 0xC398_8BAE_E42E_4B10, 0x36C7_22F0_EFCC_8803),
        (0x6E49_AC17_0DBB_7FCD, 0x85C3_8899_A7B5_A833, 0x08B0_F2EC_89CC_AA37, 0x02B3_FF48_861E_339B),
        (0xA8C5_AE03_AD98_E405, 0x6FC3_FF4C_49EB_59AD, 0x6016_2F44_27BC_657B, 0x0B70_D061_D58D_8A7F),
    ),
    (
        (0x2E06_CC4A_F33B_0A06, 0xAD3D_E8BE_46ED_9693, 0xF875_3ADE_B9D7_CEE2, 0x3FC2_A13F_127F_96A4),
        (0xC120_80AC_117E_E15F, 0x00CB_3D62_1E17_1D80, 0x1BD6_3434_AC8C_419F, 0x0C41_A6E4_8DD2_3A51),
        (0x9685_213E_9692_F5E1, 0x72AA_AD7E_4E75_339D, 0xED44_7653_7169_084E, 0x2DE8_072A_6BD8_6884),
    ),
    (
        (0x0AD0_1184_567B_027C, 0xB81C_F735_CC9C_39C0, 0x9D34_96A3_D9FE_05EC, 0x0355_7A8F_7B38_A17F),
        (0x45BC_B5AC_0082_6ABC, 0x060F_4336_3D81_8E54, 0xEE97_6D34_282F_1A37, 0x0B5F_5955_2F49_8735),
        (0x2F29_09E1_7E22_B0DF, 0xF5D6_46E5_7507_E548, 0xFEDB_B185_70DC_7300, 0x0E29_23A5_FEE7_B878),
    ),
    (
        (0xF71E_ED73_F15B_3326, 0xCF1C_B37C_3B03_2AF6, 0xC787_BE97_020A_7FDD, 0x1D78_5005_A7A0_0592),
        (0x0ACF_BFB2_23F8_F00D, 0xA590_B88A_3B06_0294, 0x0BA5_FEDC_B8F2_5BD2, 0x1AD7_72C2_73D9_C6DF),
        (0xC1CE_13D6_0F2F_5031, 0x8105_10EB_61F0_672D, 0xA78F_3275_C278_234B, 0x027B_D647_85FC_BD2A),
    ),
    (
        (0x8337_F5E0_7923_A853, 0xE224_3134_6945_7B8E, 0xCE6F_8FFE_A103_1B6D, 0x2080_0F44_1B4A_0526),
        (0xA33D_7BED_89A4_408A, 0x36CD_C8EE_D662_AD37, 0x6EEA_2CD4_9F43_12B4, 0x3D5A_D61D_7B65_F938),
        (0x3BBB_AE94_CC19_5284, 0x1DF9_6CC0_3EA4_B26D, 0x02C5_F91B_E4DD_8E3D, 0x1333_8BC3_51FC_46DD),
    ),
    (
        (0xC527_1C29_7852_819E, 0x646C_49F9_B46C_BF19, 0xB87D_B1E2_AF3E_A923, 0x25E5_2BE5_07C9_2760),
        (0x5C38_0AB7_01B5_2EA9, 0xA34C_83A3_485C_6B2D, 0x7109_6D8B_1B98_3C98, 0x1C49_2D64_C157_AAA4),
        (0xA20C_0B3D_A0DA_4CA3, 0xD434_87BC_288D_F682, 0xF4E6_C5E7_A573_F592, 0x0C5B_8015_7999_2718),
    ),
    (
        (0x7EA3_3C93_E408_33CF, 0x584E_9E62_A7F9_554E, 0x6869_5C0C_D7CB_F43D, 0x1090_B1B4_D2BE_BE7A),
        (0xE383_E1EC_3BAA_8D69, 0x1B21_8E35_ECF2_328E, 0x68F5_CE5C_BED1_9CAD, 0x33E3_8018_A801_387A),
        (0xB76B_0B3D_787E_E953, 0x5F4A_02D2_8729_E3AE, 0xEEF8_D83D_0E87_6BAC, 0x1654_AF18_772B_2DA5),
    ),
    (
        (0xEF7C_E6A0_1326_5477, 0xBB08_9387_0367_EC6C, 0x4474_2DE8_8C5A_B0D5, 0x1678_BE3C_C9C6_7993),
        (0xAF5D_4789_3348_F766, 0xDAF1_8183_55B1_3B4F, 0x7FF9_C6BE_546E_928A, 0x3780_BD1E_01F3_4C22),
        (0xA123_8032_0D7C_C1DE, 0x5D11_E69A_A6C0_B98C, 0x0786_018E_7CB7_7267, 0x1E83_D631_5C9F_125B),
    ),
    (
        (0x1799_603E_855C_E731, 0xC486_894D_76E0_C33B, 0x160B_4155_2F29_31C8, 0x354A_FD0A_2F9D_0B26),
        (0x8B99_7EE0_6BE1_BFF3, 0x60B0_0DBE_1FAC_ED07, 0x2D8A_FFA6_2905_C5A5, 0x00CD_6D29_F166_EADC),
        (0x08D0_6419_1708_2F2C, 0xC60D_0197_3F18_3057, 0xDBE0_E3D7_CDBC_66EF, 0x1D62_1935_2768_E3AE),
    ),
    (
        (0xFA08_DD98_0638_7577, 0xAFE3_CA1D_B8D4_F529, 0xE48D_2370_D7D1_A142, 0x1463_36E2_5DB5_181D),
        (0xA901_D3CE_84DE_0AD4, 0x022E_54B4_9C13_D907, 0x997A_2116_3E2E_43DF, 0x0005_D8E0_85FD_72EE),
        (0x1C36_F313_4196_4484, 0x6F8E_BC1D_2296_021A, 0x0DD5_E61C_8A4E_8642, 0x364E_97C7_A389_3227),
    ),
    (
        (0xD7A0_0C03_D2E0_BAAA, 0xFA97_EC80_AD30_7A52, 0x561C_6FFF_1534_6878, 0x0118_9910_671B_C16B),
        (0x63FD_8AC5_7A95_CA8C, 0x4C0F_7E00_1DF4_90AA, 0x5229_DFAA_0123_1A45, 0x162A_7C80_F4D2_D12E),
        (0x32E6_9EFB_22F4_0B96, 0xCAFF_31B4_FDA3_2124, 0x2604_E4AF_B09F_8603, 0x2A0D_6C09_5766_66BB),
    ),
    (
        (0xC0A0_180F_8CBF_C0D2, 0xF444_D10D_63A7_4E2C, 0xE16A_4D60_3D5A_808E, 0x0978_E5C5_1E1E_5649),
        (0x03F4_460E_BC35_1B6E, 0x0508_7D90_3BDA_CFD1, 0xEBE1_9BBD_CE25_1011, 0x1BDC_EE3A_ACA9_CD25),
        (0xF619_64BF_3ADE_7670, 0x0C94_7321_E007_5E3F, 0xE494_7914_0B19_44FD, 0x1862_CCCB_70B5_B885),
    ),
    (
        (0xC326_7DA6_E94A_DC50, 0x39EE_99C1_CC6E_5DDA, 0xBC26_CC88_3A19_87E1, 0x1F3E_91D8_63C1_6922),
        (0x0F85_B4AC_2C36_7406, 0xFA66_1465_C656_AD99, 0xEF5C_08F8_478F_663A, 0x1AF4_7A48_A601_6A49),
        (0x0EAB_CD87_E7D0_1B15, 0x1C36_98B0_A2E3_DA10, 0x009D_5733_8C69_3505, 0x3C8E_E901_956E_3D3F),
    ),
    (
        (0x8B94_7721_8967_3476, 0xE10C_E2B7_069F_4DBD, 0x68D0_B024_F591_B520, 0x1660_A8CD_E7FE_C553),
        (0x9D8D_0F67_FDAA_79D5, 0x3963_C2C1_F558_6E2F, 0x1303_9363_34DD_1132, 0x0F6D_9919_29D5_E4E7),
        (0x7A43_3091_E1CE_2D3A, 0x4E7F_DA77_0712_F343, 0xCC62_5EAA_AB52_B4DC, 0x02B9_CEA1_921C_D9F6),
    ),
    (
        (0x3797_B2D8_3760_43B3, 0xD8CA_F468_976F_0472, 0x214F_7C67_84AC_B565, 0x14A3_23B9_9B90_0331),
        (0x347F_EF2C_00F0_953A, 0x718B_7FBC_7788_AF78, 0xEC01_EA79_642D_5760, 0x1904_76B5_80CB_9277),
        (0xFF4E_7E6F_B268_DFD7, 0x9660_902B_6008_7651, 0xA424_63D3_0B44_2B6F, 0x090A_3A9D_869D_2EEF),
    ),
    (
        (0xF983_387E_A045_6203, 0xE365_0013_04F9_A11E, 0x0DBE_8FD2_270A_6795, 0x3877_A955_8636_7567),
        (0x39C0_AF0F_E01F_4A06, 0x6011_8C53_A218_1352, 0x5DF3_9A2C_C63D_DC0A, 0x2D89_4691_240F_E953),
        (0x1ACA_9EAF_9BBA_9850, 0x5914_E855_EEB4_4AA1, 0x7EF7_1780_2016_6189, 0x21B9_C182_92BD_BC59),
    ),
    (
        (0x33F5_09A7_4AD9_D39B, 0x272E_1CC6_C36A_2968, 0x505A_05F2_A6AE_834C, 0x2FE7_6BE7_CFF7_23E2),
        (0x0DF9_FA97_277F_A8B4, 0xD15B_FF84_0DDA_E8A5, 0x9299_81D7_CFCE_253B, 0x187A_A448_F391_E3CA),
        (0xF0C6_6AF5_FFC7_3736, 0x663C_CF7B_2FFE_4B5E, 0x007A_B3AA_3617_F422, 0x0B70_83AD_7517_07BF),
    ),
    (
        (0x2F9B_20F1_FBD4_9791, 0x1975_B962_F6CB_8E0B, 0x3BC4_CA99_02C5_2ACB, 0x030D_DBB4_7049_3F16),
        (0x3A1C_62CA_8FBF_2525, 0x8FB8_AB9D_60EA_17B2, 0x950B_0AB1_8D35_46DF, 0x3130_FBAF_FB5A_A82A),
        (0x43A8_7618_0DC3_82E0, 0x15CE_2EAD_2FCD_051E, 0x4F74_D74B_AC2E_E457, 0x337F_5447_07C4_30F0),
    ),
    (
        (0x26DE_98A8_736D_1D11, 0x7D8E_471A_9FB9_5FEF, 0xAC9D_91B0_930D_AC75, 0x3499_7991_9015_394F),
        (0xCCFC_B618_31D5_C775, 0x3BF9_3DA6_FFF3_1D95, 0x2305_CD7A_921E_C5F1, 0x027C_C4EF_E3FB_35DD),
        (0xC3FA_2629_635D_27DE, 0x67F1_C6B7_3147_64AF, 0x61B7_1A36_9868_2AD2, 0x037F_9F23_6595_4C5B),
    ),
    (
        (0x77C5_B024_8483_71AE, 0x6041_4ABE_362D_01C9, 0x10F1_CC6D_F8B4_BCD7, 0x1F69_7CAC_4D07_FEB7),
        (0x786A_DD24_4AA0_EF29, 0x3145_C478_0631_09D6, 0x26E6_C851_FBD5_72A6, 0x267A_750F_E5D7_CFBC),
        (0x180E_2B4D_3E75_6F65, 0xAF28_5FA8_2CE4_FAE5, 0x678C_9996_D9A4_72C8, 0x0C91_FEAB_4A43_193A),
    ),
    (
        (0x79C4_7C57_3AC4_10F7, 0x7E3B_83AF_4A4B_A3BA, 0x2186_C303_8EA0_5E69, 0x1745_569A_0A3E_3014),
        (0x1E03_8852_2696_191F, 0xFDFF_66C6_F3B5_FFE1, 0xECA5_1207_78A5_6711, 0x2986_3D54_6E7E_7C0D),
        (0x2F22_5E63_66BF_E390, 0xA79A_03DF_8339_94C6, 0xBF06_BAE4_9EF8_53F6, 0x1148_D6AB_2BD0_0192),
    ),
    (
        (0xF4F6_331A_8B26_5D15, 0xF745_F45D_350D_41D4, 0xE18B_1499_060D_A366, 0x02E0_E121_B0F3_DFEF),
        (0x078A_E6AA_1510_54B7, 0x6904_0173_6D44_A653, 0xB89E_F73A_40A2_B274, 0x0D0A_A46E_76A6_A278),
        (0x9A4D_532C_7B6E_0958, 0x392D_DE71_0F1F_06DB, 0xEEE5_45F3_FA6D_3D08, 0x1394_3675_B04A_A986),
    ),
    (
        (0x961F_C818_DCBB_66B5, 0xC9F2_B325_7530_DAFE, 0xD97A_11D6_3088_F5D9, 0x2901_EC61_942D_34AA),
        (0xFDF5_44B9_63D1_FDC7, 0x22FF_A2A2_AF9F_A3E3, 0xF431_D544_34A3_E0CF, 0x2020_4A21_05D2_2E7E),
        (0x1211_B9E2_190D_6852, 0xA004_ABE8_E015_28C4, 0x5C1E_3E9E_27A5_71C3, 0x3A8A_6282_9512_1D5C),
    ),
)

_MDS_LIMBS = (
    (
        (0x323F_2486_D7E1_1B63, 0x97D7_A0AB_2385_0B56, 0xB3D5_9FBD_C8C9_EAD4, 0x0AB5_E5B8_74A6_8DE7),
        (0x8ECA_5596_E996_AB5E, 0x240D_4A7C_BF73_5736, 0x293F_0F0D_886C_7954, 0x3191_6628_E58A_5ABB),
        (0x19D1_CF25_D8E8_345D, 0xA0A3_B71A_5FB1_5735, 0xD803_952B_BB36_4FDF, 0x07C0_45D5_F5E9_E5A6),
    ),
    (
        (0xD049_CDC8_D085_167C, 0x3A0A_4640_48BD_770A, 0xF8E2_4F66_822C_2D9F, 0x2331_6263_0EBF_9ED7),
        (0x4022_7011_3E04_7A2E, 0x78F8_365C_85BB_AB07, 0xB366_6454_8D60_957D, 0x25CA_E259_9892_A8B0),
        (0xF84D_806F_685F_747A, 0x9AAD_3D82_62EF_D83F, 0x7493_8717_989A_1957, 0x22F5_B5E1_E608_1C97),
    ),
    (
        (0xFEE7_A994_4F84_DBE4, 0x2168_0EAB_C56B_C15D, 0xF333_AA91_C383_3464, 0x2E29_DD59_C64B_1037),
        (0xC771_EFFA_4326_3664, 0xCBEA_F48B_3A06_24C3, 0x92D1_5E7D_CEEF_1665, 0x1D1A_AB4E_C1CD_6788),
        (0x1563_9415_F6E8_5EF1, 0x7587_2C39_B59A_31F6, 0x51E0_CBEA_D655_16B9, 0x3BF7_6308_6A18_9364),
    ),
)

_MDS_INV_LIMBS = (
    (
        (0xC6DE_463C_D140_4E6B, 0x4543_705F_35E9_8AB5, 0xCC59_FFD0_0DE8_6443, 0x2CC0_57F3_FA14_687A),
        (0x1718_4041_7CAB_7576, 0xFADB_F8AE_7AE2_4796, 0x5FD7_2B55_DF20_8385, 0x32E7_C439_F2F9_67E5),
        (0x9426_45BD_7D44_64E0, 0x1403_DB6F_5030_2040, 0xF461_778A_BF6C_91FA, 0x2EAE_5DF8_C311_5969),
    ),
    (
        (0xA1CA_1516_A4A1_A6A0, 0x13F0_74FD_E9A1_8B29, 0xDB18_B4AE_FE68_D26D, 0x07BF_3684_8106_7199),
        (0xE824_25BC_1B23_A059, 0xBB1D_6504_0C85_C1BF, 0x018A_918B_9DAC_5DAD, 0x2AEC_6906_C63F_3CF1),
        (0xE054_1ADF_238E_0781, 0x76B2_A713_9DB7_1B36, 0x1215_944A_64A2_46B2, 0x0952_E024_3AEC_2AF0),
    ),
    (
        (0x2A41_8D8D_73A7_C908, 0xAEF9_112E_952F_DBB5, 0x723A_63A0_C09D_AB26, 0x2FCB_BA6F_9159_A219),
        (0x76EF_AB42_D4FB_A90B, 0xC5E4_960D_7424_CD37, 0xB4DD_D4B4_D645_2256, 0x1EC7_3725_74F3_851B),
        (0xADC8_933C_6F3C_72EE, 0x87A7_435D_30F8_BE81, 0x3C26_FA4B_7D25_B1E4, 0x0D0C_2EFD_6472_F12A),
    ),
)


def _matrix(limbs) -> Matrix:
    return tuple(tuple(Fp.from_raw(entry) for entry in row) for row in limbs)


@lru_cache(maxsize=None)
def round_constants() -> tuple[Round, ...]:
    """Return all 64 rounds of constants, three elements per round."""
    late = _matrix(_LATE_LIMBS)
    return early_round_constants() + late  # type: ignore[return-value]


@lru_cache(maxsize=None)
def mds() -> Matrix:
    """Return the 3 x 3 MDS matrix."""
    return _matrix(_MDS_LIMBS)


@lru_cache(maxsize=None)
def mds_inv() -> Matrix:
    """Return the inverse of the MDS matrix."""
    return _matrix(_MDS_INV_LIMBS)


__all__ = ["round_constants", "mds", "mds_inv"]