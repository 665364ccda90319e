#!/usr/bin/env python3
"""
突变特征模块测试
"""

import pytest

from mutrack.mutations import Mutation
from mutrack.features import BasicFeature, Strand, UnsupportedFeatureOperation
from mutrack.config import Color, ColorTable, GenomeManager, Preferences, PreferencesManager


def make_mutation(start=100, end=100, chromosome="chr7",
                  ref="A", alt1="G", alt2="G", mutation_type="Missense_Mutation"):
    mutation = Mutation("SAMPLE-01", chromosome, start, end, mutation_type)
    mutation.ref_allele = ref
    mutation.alt_allele1 = alt1
    mutation.alt_allele2 = alt2
    return mutation


class TestMutationCreation:
    """测试Mutation对象创建"""

    def test_fields(self):
        """测试构造字段"""
        mutation = Mutation("SAMPLE-01", "chr7", 100, 101, "Missense_Mutation")

        assert mutation.sample_id == "SAMPLE-01"
        assert mutation.chr == "chr7"
        assert mutation.contig == "chr7"
        assert mutation.start == 100
        assert mutation.end == 101
        assert mutation.mutation_type == "Missense_Mutation"
        assert mutation.feature_type == "mutation"
        assert mutation.ref_allele is None
        assert mutation.alt_allele1 is None
        assert mutation.alt_allele2 is None
        assert mutation.attributes is None

    def test_setters(self):
        """测试坐标和染色体修改"""
        mutation = Mutation("SAMPLE-01", "7", 100, 101, "Missense_Mutation")
        mutation.chr = "chr7"
        mutation.start = 200
        mutation.end = 202

        assert mutation.chr == "chr7"
        assert mutation.start == 200
        assert mutation.end == 202

    def test_identity_is_read_only(self):
        """测试样本id和突变类型不可修改"""
        mutation = Mutation("SAMPLE-01", "chr7", 100, 101, "Missense_Mutation")
        with pytest.raises(AttributeError):
            mutation.sample_id = "OTHER"
        with pytest.raises(AttributeError):
            mutation.mutation_type = "Silent"


class TestDisplayName:
    """测试显示名称"""

    def test_single_base(self):
        """测试单碱基突变, 重复的alt2不显示"""
        assert make_mutation().name == "chr7:101 A>G"

    def test_multi_base(self):
        """测试多碱基区间"""
        assert make_mutation(end=105).name == "chr7:101-105 A>G"

    def test_end_equal_to_start_plus_one(self):
        """测试end等于start+1时不显示区间终点"""
        assert make_mutation(end=101).name == "chr7:101 A>G"

    def test_thousands_separator(self):
        """测试位置千分位格式"""
        mutation = make_mutation(start=140453135, end=140453136, ref="A", alt1="T", alt2="T")
        assert mutation.name == "chr7:140,453,136 A>T"

    def test_alt1_equals_ref(self):
        """测试杂合突变: alt1与参考相同"""
        assert make_mutation(alt1="A", alt2="G").name == "chr7:101 A>G"

    def test_biallelic(self):
        """测试两个不同的替换"""
        assert make_mutation(alt1="G", alt2="T").name == "chr7:101 A>G A>T"

    def test_homozygous_reference(self):
        """测试没有等位变化"""
        assert make_mutation(alt1="A", alt2="A").name == "chr7:101"

    def test_missing_alleles(self):
        """测试缺少等位信息"""
        assert make_mutation(ref=None).name == "chr7:101"
        assert make_mutation(alt1=None).name == "chr7:101"
        assert make_mutation(alt2=None).name == "chr7:101 A>G"

    def test_name_is_cached(self):
        """测试名称缓存, 修改等位基因后不重新计算"""
        mutation = make_mutation()
        assert mutation.name == "chr7:101 A>G"

        mutation.alt_allele1 = "T"
        mutation.start = 500
        assert mutation.name == "chr7:101 A>G"

    def test_name_override(self):
        """测试显式设置名称"""
        mutation = make_mutation()
        mutation.name = "BRAF V600E"
        assert mutation.name == "BRAF V600E"
        assert mutation.get_description() == "BRAF V600E<br>Missense_Mutation"

        # 清除覆盖后重新推导
        mutation.name = None
        assert mutation.name == "chr7:101 A>G"

    def test_description(self):
        """测试HTML描述"""
        assert make_mutation().get_description() == "chr7:101 A>G<br>Missense_Mutation"


class TestCanonicalAlleleId:
    """测试等位基因标识"""

    def test_allele_id(self):
        """测试标识格式, 去掉chr前缀"""
        assert make_mutation().get_canonical_allele_id() == "7,101,A,G"

    def test_without_chr_prefix(self):
        """测试无chr前缀的染色体"""
        assert make_mutation(chromosome="X").get_canonical_allele_id() == "X,101,A,G"

    def test_alt1_equals_ref(self):
        """测试alt1与参考相同时使用alt2"""
        assert make_mutation(alt1="A", alt2="T").get_canonical_allele_id() == "7,101,A,T"

    def test_none_without_ref(self):
        """测试缺少参考等位基因时返回None"""
        mutation = make_mutation(ref=None)
        assert mutation.get_canonical_allele_id() is None

    def test_memoized(self):
        """测试标识缓存, 修改等位基因后不重新计算"""
        mutation = make_mutation()
        first = mutation.get_canonical_allele_id()
        mutation.alt_allele1 = "C"
        mutation.alt_allele2 = "C"

        assert mutation.get_canonical_allele_id() == first
        assert mutation.get_canonical_allele_id() is first


class TestCopy:
    """测试复制"""

    def test_copy_fields(self):
        """测试复制标识和标签字段"""
        source = make_mutation()
        copy = source.copy()

        assert copy is not source
        assert copy.sample_id == source.sample_id
        assert copy.chr == source.chr
        assert copy.start == source.start
        assert copy.end == source.end
        assert copy.mutation_type == source.mutation_type
        assert copy.name == "chr7:101 A>G"

    def test_copy_drops_alleles(self):
        """测试复制不携带等位基因"""
        source = make_mutation()
        source.attributes = {"gene": "BRAF"}
        copy = Mutation.from_mutation(source)

        assert copy.ref_allele is None
        assert copy.alt_allele1 is None
        assert copy.alt_allele2 is None
        assert copy.attributes is None
        assert source.get_canonical_allele_id() == "7,101,A,G"
        assert copy.get_canonical_allele_id() is None

    def test_copy_keeps_computed_allele_id(self):
        """测试已计算的标识被复制, 之后设置的等位基因不改变它"""
        source = make_mutation()
        source.get_canonical_allele_id()
        copy = source.copy()

        copy.ref_allele = "C"
        copy.alt_allele1 = "T"
        assert copy.get_canonical_allele_id() == "7,101,A,G"

    def test_copy_before_alleles_diverges(self):
        """测试在设置等位基因前复制, 之后可以独立变化"""
        source = Mutation("SAMPLE-01", "chr7", 100, 100, "Missense_Mutation")
        copy = source.copy()

        source.ref_allele, source.alt_allele1 = "A", "G"
        copy.ref_allele, copy.alt_allele1 = "C", "T"

        assert source.get_canonical_allele_id() == "7,101,A,G"
        assert copy.get_canonical_allele_id() == "7,101,C,T"

    def test_copy_name_is_snapshot(self):
        """测试复制的名称在复制时确定"""
        source = Mutation("SAMPLE-01", "chr7", 100, 100, "Missense_Mutation")
        copy = source.copy()
        copy.ref_allele, copy.alt_allele1 = "A", "G"

        assert copy.name == "chr7:101"


class TestLinks:
    """测试外部注释链接"""

    def test_mutation_assessor_url(self):
        """测试Mutation Assessor链接"""
        GenomeManager.get_instance().set_genome_id("hg19")
        url = make_mutation().get_mutation_assessor_url()

        assert url == "http://mutationassessor.org/r3/?cm=var&var=hg19,7,101,A,G"

    def test_mutation_assessor_url_without_ref(self):
        """测试缺少参考等位基因时没有链接"""
        assert make_mutation(ref=None).get_mutation_assessor_url() is None

    def test_mutation_assessor_url_follows_genome(self):
        """测试链接读取当前基因组"""
        mutation = make_mutation()
        GenomeManager.get_instance().set_genome_id("hg18")
        assert "var=hg18,7,101,A,G" in mutation.get_mutation_assessor_url()

        GenomeManager.get_instance().set_genome_id("mm10")
        assert "var=mm10,7,101,A,G" in mutation.get_mutation_assessor_url()

    @pytest.mark.parametrize("genome_id", ["hg38", "GRCh38"])
    def test_cravat_link_build_38(self, genome_id):
        """测试build 38下的CRAVAT链接"""
        GenomeManager.get_instance().set_genome_id(genome_id)
        link = make_mutation().get_cravat_link()

        assert link == ("<a target='_blank' "
                        "href='http://www.cravat.us/CRAVAT/variant.html?variant=chr7_101_+_A_G'>"
                        "Cravat A->G</a>")

    def test_cravat_link_adds_chr_prefix(self):
        """测试染色体名称总是带chr前缀"""
        GenomeManager.get_instance().set_genome_id("hg38")
        link = make_mutation(chromosome="22", alt1="A", alt2="C").get_cravat_link()

        assert "variant=chr22_101_+_A_C'" in link
        assert "chrchr" not in link

    @pytest.mark.parametrize("genome_id", ["hg19", "GRCh37", "mm10", "hg38_1kg"])
    def test_cravat_link_other_builds(self, genome_id):
        """测试其他基因组版本没有CRAVAT链接"""
        GenomeManager.get_instance().set_genome_id(genome_id)
        assert make_mutation().get_cravat_link() is None

    def test_cravat_link_without_ref(self):
        """测试缺少参考等位基因时没有CRAVAT链接"""
        GenomeManager.get_instance().set_genome_id("hg38")
        assert make_mutation(ref=None).get_cravat_link() is None


class TestValueString:
    """测试提示文本"""

    def test_type_only(self):
        """测试没有等位基因和属性"""
        mutation = Mutation("SAMPLE-01", "chr7", 100, 101, "Silent")
        assert mutation.get_value_string(100.5, 42) == "Type: Silent"

    def test_with_links_and_attributes(self):
        """测试包含属性和两个链接"""
        GenomeManager.get_instance().set_genome_id("hg38")
        mutation = make_mutation()
        mutation.attributes = {"gene": "BRAF"}

        value = mutation.get_value_string(100.5, 42, None)
        lines = value.split("<br")

        assert lines[0] == "Type: Missense_Mutation"
        assert lines[1] == ">gene = BRAF"
        assert lines[2] == ('/><a href="http://mutationassessor.org/r3/?cm=var&var=hg38,7,101,A,G">'
                            'Mutation Assessor</a>')
        assert lines[3].startswith("/><a target='_blank'")
        assert len(lines) == 4

    def test_without_cravat(self):
        """测试非build 38时省略CRAVAT链接"""
        GenomeManager.get_instance().set_genome_id("hg19")
        value = make_mutation().get_value_string(0, 0)

        assert "Mutation Assessor" in value
        assert "Cravat" not in value

    def test_follows_genome_changes(self):
        """测试切换基因组后提示文本更新"""
        mutation = make_mutation()
        GenomeManager.get_instance().set_genome_id("hg19")
        assert "Cravat" not in mutation.get_value_string(0, 0)

        GenomeManager.get_instance().set_genome_id("hg38")
        assert "Cravat A->G" in mutation.get_value_string(0, 0)


class TestColor:
    """测试颜色"""

    def test_default_scheme(self):
        """测试默认配色方案"""
        assert make_mutation().color == Color(170, 20, 240)

    def test_reflects_current_scheme(self):
        """测试颜色跟随当前配色方案变化"""
        mutation = make_mutation()
        preferences = PreferencesManager.get_preferences()

        preferences.set_mutation_color("Missense_Mutation", "255,0,0")
        assert mutation.color == Color(255, 0, 0)

        preferences.set_mutation_color("Missense_Mutation", "#0000ff")
        assert mutation.color == Color(0, 0, 255)

    def test_alias_follows_target_category(self):
        """测试别名类别跟随目标类别的颜色变化"""
        mutation = make_mutation(mutation_type="Missense_Mutation")
        PreferencesManager.get_preferences().set_mutation_color("Missense", "255,0,0")

        assert mutation.color == Color(255, 0, 0)

    def test_alias_explicit_color_wins(self):
        """测试为别名单独设置的颜色优先"""
        mutation = make_mutation(mutation_type="Missense_Mutation")
        preferences = PreferencesManager.get_preferences()
        preferences.set_mutation_color("Missense_Mutation", "0,0,255")
        preferences.set_mutation_color("Missense", "255,0,0")

        assert mutation.color == Color(0, 0, 255)

    def test_setter_is_ignored(self):
        """测试设置颜色无效"""
        mutation = make_mutation()
        before = mutation.color

        mutation.color = Color(1, 2, 3)
        assert mutation.color == before

        PreferencesManager.get_preferences().set_mutation_color("Missense_Mutation", "green")
        assert mutation.color == Color(0, 128, 0)

    def test_replaced_preferences(self):
        """测试替换整个偏好设置"""
        mutation = make_mutation(mutation_type="Custom")
        PreferencesManager.set_preferences(Preferences(config_data={
            "mutation_colors": {"colors": {"Custom": "10,20,30"}}
        }))
        assert mutation.color == Color(10, 20, 30)

    def test_no_mapping(self):
        """测试没有对应颜色时返回表的默认值"""
        mutation = make_mutation(mutation_type="Not_A_Category")
        assert mutation.color is None

        PreferencesManager.get_preferences().set_mutation_color_scheme(
            ColorTable({"Missense": "1,1,1"}, default="128,128,128"))
        assert mutation.color == Color(128, 128, 128)


class TestFeatureInterface:
    """测试通用特征接口"""

    def test_fixed_values(self):
        """测试固定返回值"""
        mutation = make_mutation()

        assert mutation.strand is Strand.NONE
        assert mutation.score == 0
        assert mutation.has_score() is False

    def test_overlaps_always_false(self):
        """测试重叠判断总是False"""
        mutation = make_mutation()

        assert mutation.overlaps(BasicFeature("chr7", 0, 1000)) is False
        assert mutation.overlaps(mutation) is False
        assert mutation.overlaps(make_mutation()) is False

    @pytest.mark.parametrize("exon_index", [0, 1, -1])
    def test_amino_acid_sequence_unsupported(self, exon_index):
        """测试氨基酸序列不支持"""
        with pytest.raises(UnsupportedFeatureOperation):
            make_mutation().get_amino_acid_sequence(exon_index)

    def test_coding_bounds_unsupported(self):
        """测试编码区边界不支持"""
        mutation = make_mutation()
        with pytest.raises(UnsupportedFeatureOperation):
            mutation.cd_start
        with pytest.raises(NotImplementedError):
            mutation.cd_end
